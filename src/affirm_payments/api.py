"""
Public, high-level helpers for one-off calls against the Affirm API.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .core.client import HttpTransport, PaymentClient
from .core.config import ClientConfig, load_client_config
from .core.environment import ClientEnvironment, build_environment, load_env_file
from .core.errors import (
    AffirmError,
    ConfigurationError,
    ResponseError,
    ValidationError,
)

__all__ = [
    "AffirmError",
    "ClientConfig",
    "ClientEnvironment",
    "ConfigurationError",
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
]


def create_payment_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[HttpTransport] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    public_api_key: Optional[str] = None,
    private_api_key: Optional[str] = None,
    is_sandbox: Optional[bool] = None,
) -> PaymentClient:
    """
    Construct a :class:`PaymentClient`.

    Supply a ready-made :class:`ClientConfig`, or let the helper load one from
    the environment, a ``.env`` file and the keyword arguments.
    """
    if config is not None:
        extras = (overrides, base, public_api_key, private_api_key, is_sandbox)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            public_api_key=public_api_key,
            private_api_key=private_api_key,
            is_sandbox=is_sandbox,
        )
    return PaymentClient(cfg, session=session)


def authorize_charge(
    checkout_token: str,
    optional_data: Optional[Mapping[str, Any]] = None,
    **client_options: Any,
) -> Dict[str, Any]:
    """
    Authorize a checkout in one call.

    ``client_options`` are forwarded to :func:`create_payment_client`.
    """
    client = create_payment_client(**client_options)
    return client.authorize(checkout_token, optional_data)


def capture_charge(
    charge_id: str,
    optional_data: Optional[Mapping[str, Any]] = None,
    **client_options: Any,
) -> Dict[str, Any]:
    client = create_payment_client(**client_options)
    return client.capture(charge_id, optional_data)


def read_charge(
    charge_id: str,
    optional_data: Optional[Mapping[str, Any]] = None,
    **client_options: Any,
) -> Dict[str, Any]:
    client = create_payment_client(**client_options)
    return client.read(charge_id, optional_data)


def void_charge(charge_id: str, **client_options: Any) -> Dict[str, Any]:
    client = create_payment_client(**client_options)
    return client.void(charge_id)


def refund_charge(
    charge_id: str,
    optional_data: Optional[Mapping[str, Any]] = None,
    **client_options: Any,
) -> Dict[str, Any]:
    client = create_payment_client(**client_options)
    return client.refund(charge_id, optional_data)
