"""Unit tests for optional parameter validation and whitelisting."""

import pytest

from affirm_payments import ValidationError
from affirm_payments.core.params import (
    CAPTURE_PARAMETERS,
    READ_PARAMETERS,
    matches_type,
    prepare_optional_data,
    require_string,
    validate_optional_data,
    whitelist,
)


class TestMatchesType:
    @pytest.mark.parametrize("value", ["", "abc"])
    def test_strings(self, value):
        assert matches_type(value, str)

    @pytest.mark.parametrize("value", [None, 1, 1.0, b"abc"])
    def test_non_strings(self, value):
        assert not matches_type(value, str)

    @pytest.mark.parametrize("value", [0, 10, -3])
    def test_integers(self, value):
        assert matches_type(value, int)

    @pytest.mark.parametrize("value", [None, 10.0, "10", True, False])
    def test_non_integers(self, value):
        assert not matches_type(value, int)


class TestValidateOptionalData:
    def test_only_supplied_keys_are_checked(self):
        validate_optional_data(READ_PARAMETERS, {"limit": 10})

    def test_undeclared_keys_are_not_checked(self):
        validate_optional_data(READ_PARAMETERS, {"amount": None})

    def test_wrong_type_raises(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_optional_data(READ_PARAMETERS, {"limit": 10, "after": 5})

        assert excinfo.value.field == "after"
        assert excinfo.value.expected == "str"
        assert excinfo.value.value == 5
        assert str(excinfo.value) == "after must be of type str, got int"


class TestWhitelist:
    def test_keeps_allowed_keys(self):
        data = {"order_id": "xyz", "limit": 10, "foo": "bar"}

        assert whitelist(data, ["order_id", "limit"]) == {"order_id": "xyz", "limit": 10}

    def test_drops_empty_values(self):
        data = {"order_id": "", "limit": 0, "before": "abc"}

        assert whitelist(data, READ_PARAMETERS.keys() | {"order_id"}) == {"before": "abc"}


class TestPrepareOptionalData:
    def test_none_means_nothing(self):
        assert prepare_optional_data(CAPTURE_PARAMETERS, None) == {}

    def test_validates_then_whitelists(self):
        data = {"order_id": "xyz", "shipping_carrier": "", "amount": "ignored"}

        assert prepare_optional_data(CAPTURE_PARAMETERS, data) == {"order_id": "xyz"}

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError, match="optional_data"):
            prepare_optional_data(CAPTURE_PARAMETERS, [("order_id", "xyz")])


class TestRequireString:
    def test_returns_value(self):
        assert require_string("charge_id", "ddkr5k5of") == "ddkr5k5of"

    def test_rejects_other_types(self):
        with pytest.raises(ValidationError, match="charge_id must be of type str"):
            require_string("charge_id", 123)
