"""
Core primitives for talking to the Affirm charges API.
"""

from .client import HttpResponse, HttpTransport, PaymentClient
from .config import LIVE_URL, SANDBOX_URL, ClientConfig, load_client_config
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import AffirmError, ConfigurationError, ResponseError, ValidationError
from .params import (
    AUTHORIZE_PARAMETERS,
    CAPTURE_PARAMETERS,
    READ_PARAMETERS,
    REFUND_PARAMETERS,
    VOID_PARAMETERS,
    prepare_optional_data,
    validate_optional_data,
    whitelist,
)

__all__ = [
    "AUTHORIZE_PARAMETERS",
    "CAPTURE_PARAMETERS",
    "LIVE_URL",
    "READ_PARAMETERS",
    "REFUND_PARAMETERS",
    "SANDBOX_URL",
    "VOID_PARAMETERS",
    "AffirmError",
    "ClientConfig",
    "ClientEnvironment",
    "ConfigurationError",
    "HttpResponse",
    "HttpTransport",
    "PaymentClient",
    "ResponseError",
    "ValidationError",
    "build_environment",
    "load_client_config",
    "load_env_file",
    "prepare_optional_data",
    "validate_optional_data",
    "whitelist",
]
