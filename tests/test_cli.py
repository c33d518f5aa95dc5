"""Unit tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest

from affirm_payments import PaymentClient, ResponseError
from affirm_payments.cli import build_parser, run_cli

BASE_ARGS = [
    "--env-file",
    "missing.env",
    "--set",
    "AFFIRM_PUBLIC_API_KEY=abc123",
    "--set",
    "AFFIRM_PRIVATE_API_KEY=xyz321",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ("AFFIRM_PUBLIC_API_KEY", "AFFIRM_PRIVATE_API_KEY", "AFFIRM_SANDBOX"):
        monkeypatch.delenv(key, raising=False)


class TestParser:
    def test_requires_a_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_sandbox_and_live_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--sandbox", "--live", "void", "ddkr5k5of"])

    def test_rejects_malformed_override(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--set", "NOEQUALS", "void", "ddkr5k5of"])


class TestRunCli:
    def test_prints_response(self, capsys):
        with patch.object(PaymentClient, "read", return_value={"id": "ddkr5k5of"}) as read:
            exit_code = run_cli(BASE_ARGS + ["read", "ddkr5k5of", "--limit", "10"])

        assert exit_code == 0
        read.assert_called_once_with("ddkr5k5of", {"limit": 10})
        assert json.loads(capsys.readouterr().out) == {"id": "ddkr5k5of"}

    def test_forwards_only_given_options(self):
        with patch.object(PaymentClient, "capture", return_value={}) as capture:
            run_cli(BASE_ARGS + ["capture", "ddkr5k5of", "--shipping-carrier", "USPS"])

        capture.assert_called_once_with("ddkr5k5of", {"shipping_carrier": "USPS"})

    def test_sandbox_flag_selects_sandbox(self):
        with patch.object(PaymentClient, "void", autospec=True, return_value={}) as void:
            run_cli(["--sandbox"] + BASE_ARGS + ["void", "ddkr5k5of"])

        client = void.call_args.args[0]
        assert client.config.is_sandbox is True

    def test_refund_amount_is_an_integer(self):
        with patch.object(PaymentClient, "refund", return_value={}) as refund:
            run_cli(BASE_ARGS + ["refund", "ddkr5k5of", "--amount", "400"])

        refund.assert_called_once_with("ddkr5k5of", {"amount": 400})

    def test_missing_credentials(self):
        assert run_cli(["--env-file", "missing.env", "void", "ddkr5k5of"]) == 1

    def test_response_error(self):
        error = ResponseError("400 Client Error")
        with patch.object(PaymentClient, "authorize", side_effect=error):
            exit_code = run_cli(BASE_ARGS + ["authorize", "abc1234663"])

        assert exit_code == 1
