"""
Exception hierarchy raised by the Affirm payment helpers.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "AffirmError",
    "ConfigurationError",
    "ResponseError",
    "ValidationError",
]


class AffirmError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(AffirmError):
    """Raised when the supplied client configuration is missing or malformed."""


class ValidationError(AffirmError, TypeError):
    """
    Raised when an argument passed to an operation has the wrong type.

    Validation runs before any request is sent, so nothing reaches Affirm
    when this is raised.
    """

    def __init__(self, field: str, expected: str, value: Any) -> None:
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(
            f"{field} must be of type {expected}, got {type(value).__name__}"
        )


class ResponseError(AffirmError):
    """
    Raised when Affirm answers with an error or with a body that is not JSON.

    The originating transport exception, if any, is available as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
