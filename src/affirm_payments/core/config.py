"""
Client configuration for the Affirm API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .environment import build_environment
from .errors import ConfigurationError

__all__ = [
    "LIVE_URL",
    "SANDBOX_URL",
    "ClientConfig",
    "load_client_config",
]

LIVE_URL = "https://api.affirm.com/api/v2/"
SANDBOX_URL = "https://sandbox.affirm.com/api/v2/"

_PUBLIC_KEY_ENV = "AFFIRM_PUBLIC_API_KEY"
_PRIVATE_KEY_ENV = "AFFIRM_PRIVATE_API_KEY"
_SANDBOX_ENV = "AFFIRM_SANDBOX"

_FIELD_TYPES: Dict[str, type] = {
    "public_api_key": str,
    "private_api_key": str,
    "is_sandbox": bool,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{field_name} must be a boolean flag, got '{raw}'")


def _require_env(values: Mapping[str, str], key: str) -> str:
    value = values.get(key)
    if value is None or not value.strip():
        raise ConfigurationError(f"{key} must be provided")
    return value.strip()


@dataclass(frozen=True)
class ClientConfig:
    """
    Credentials and environment selection for :class:`PaymentClient`.

    Every field is type-checked on construction so a bad configuration fails
    before any request is attempted.
    """

    public_api_key: str
    private_api_key: str = field(repr=False)
    is_sandbox: bool = False

    def __post_init__(self) -> None:
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            if type(value) is not expected:
                raise ConfigurationError(
                    f"{name} must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )

    @property
    def base_url(self) -> str:
        return SANDBOX_URL if self.is_sandbox else LIVE_URL

    @property
    def auth(self) -> Tuple[str, str]:
        """HTTP basic auth pair sent with every request."""
        return (self.public_api_key, self.private_api_key)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ClientConfig":
        """
        Build a configuration from a mapping holding ``public_api_key``,
        ``private_api_key`` and ``is_sandbox``.
        """
        missing = [name for name in _FIELD_TYPES if name not in values]
        if missing:
            raise ConfigurationError(
                f"Missing configuration keys: {', '.join(missing)}"
            )
        return cls(
            public_api_key=values["public_api_key"],
            private_api_key=values["private_api_key"],
            is_sandbox=values["is_sandbox"],
        )

    @classmethod
    def from_environment(cls, values: Mapping[str, str]) -> "ClientConfig":
        """Build a configuration from ``AFFIRM_*`` environment variables."""
        return cls(
            public_api_key=_require_env(values, _PUBLIC_KEY_ENV),
            private_api_key=_require_env(values, _PRIVATE_KEY_ENV),
            is_sandbox=_parse_bool(values.get(_SANDBOX_ENV, "false"), _SANDBOX_ENV),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        public_api_key: Optional[str] = None,
        private_api_key: Optional[str] = None,
        is_sandbox: Optional[bool] = None,
    ) -> "ClientConfig":
        merged_overrides = dict(overrides or {})
        if public_api_key is not None:
            merged_overrides[_PUBLIC_KEY_ENV] = public_api_key
        if private_api_key is not None:
            merged_overrides[_PRIVATE_KEY_ENV] = private_api_key
        if is_sandbox is not None:
            merged_overrides[_SANDBOX_ENV] = "true" if is_sandbox else "false"

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_environment(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    public_api_key: Optional[str] = None,
    private_api_key: Optional[str] = None,
    is_sandbox: Optional[bool] = None,
) -> ClientConfig:
    """
    Convenience wrapper around :meth:`ClientConfig.from_env`.

    Credentials can come from environment variables, a ``.env`` file, keyword
    arguments, or a mix of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        public_api_key=public_api_key,
        private_api_key=private_api_key,
        is_sandbox=is_sandbox,
    )
