"""Shared fixtures for the affirm_payments test suite."""

from unittest.mock import MagicMock

import pytest
import requests

from affirm_payments import ClientConfig, PaymentClient

CONFIG = {
    "public_api_key": "abc123",
    "private_api_key": "xyz321",
    "is_sandbox": False,
}

AUTH = ("abc123", "xyz321")
LIVE_CHARGES = "https://api.affirm.com/api/v2/charges/"


def make_response(text, status_code=200):
    """Build a stand-in for requests.Response with the given body."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Client Error: oops", response=response)
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    """Transport double standing in for requests.Session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return PaymentClient(ClientConfig.from_mapping(CONFIG), session=session)
