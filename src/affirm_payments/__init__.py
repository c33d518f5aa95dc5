"""
Public facade for the Affirm payment helper package.

The most useful pieces are re-exported here so integrators can
``from affirm_payments import ...`` without navigating the package.
"""

from .api import (
    authorize_charge,
    capture_charge,
    create_payment_client,
    read_charge,
    refund_charge,
    void_charge,
)
from .core import (
    LIVE_URL,
    SANDBOX_URL,
    AffirmError,
    ClientConfig,
    ClientEnvironment,
    ConfigurationError,
    HttpTransport,
    PaymentClient,
    ResponseError,
    ValidationError,
    build_environment,
    load_client_config,
    load_env_file,
)

__all__ = (
    "LIVE_URL",
    "SANDBOX_URL",
    "AffirmError",
    "ClientConfig",
    "ClientEnvironment",
    "ConfigurationError",
    "HttpTransport",
    "PaymentClient",
    "ResponseError",
    "ValidationError",
    "authorize_charge",
    "build_environment",
    "capture_charge",
    "create_payment_client",
    "load_client_config",
    "load_env_file",
    "read_charge",
    "refund_charge",
    "void_charge",
)
