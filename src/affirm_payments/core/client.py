"""
HTTP client for the Affirm charges API.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Union
from urllib.parse import urlencode

import requests

from .config import ClientConfig
from .errors import ConfigurationError, ResponseError
from .params import (
    AUTHORIZE_PARAMETERS,
    CAPTURE_PARAMETERS,
    READ_PARAMETERS,
    REFUND_PARAMETERS,
    prepare_optional_data,
    require_string,
)

__all__ = [
    "HttpResponse",
    "HttpTransport",
    "PaymentClient",
]


class HttpResponse(Protocol):
    status_code: int
    text: str

    def raise_for_status(self) -> None:
        ...


class HttpTransport(Protocol):
    """
    The part of :class:`requests.Session` the client relies on.

    ``raise_for_status`` on the returned response must raise a
    :class:`requests.RequestException` for non-success statuses.
    """

    def request(self, method: str, url: str, **options: Any) -> HttpResponse:
        ...


def _status_code_of(exc: requests.RequestException) -> Optional[int]:
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None)


def _body_of(exc: requests.RequestException) -> Optional[str]:
    response = getattr(exc, "response", None)
    return getattr(response, "text", None)


class PaymentClient:
    """
    Authorize, capture, read, void and refund Affirm charges.

    Every operation returns the decoded JSON body unchanged and raises
    :class:`ResponseError` when the request fails or the body is not JSON.
    """

    def __init__(
        self,
        config: Union[ClientConfig, Mapping[str, Any]],
        *,
        session: Optional[HttpTransport] = None,
    ) -> None:
        if isinstance(config, ClientConfig):
            self.config = config
        elif isinstance(config, Mapping):
            self.config = ClientConfig.from_mapping(config)
        else:
            raise ConfigurationError(
                f"config must be a ClientConfig or a mapping, got {type(config).__name__}"
            )
        self.session = session if session is not None else requests.Session()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def authorize(
        self,
        checkout_token: str,
        optional_data: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Authorize the charge created by a completed checkout.

        ``optional_data`` may carry ``order_id``.
        """
        body: Dict[str, Any] = {
            "checkout_token": require_string("checkout_token", checkout_token)
        }
        body.update(prepare_optional_data(AUTHORIZE_PARAMETERS, optional_data))
        return self._request("POST", f"{self.base_url}charges/", body)

    def capture(
        self,
        charge_id: str,
        optional_data: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Capture an authorized charge.

        ``optional_data`` may carry ``order_id``, ``shipping_carrier`` and
        ``shipping_confirmation``.
        """
        require_string("charge_id", charge_id)
        body = prepare_optional_data(CAPTURE_PARAMETERS, optional_data)
        return self._request("POST", f"{self.base_url}charges/{charge_id}/capture", body)

    def read(
        self,
        charge_id: str,
        optional_data: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Fetch the details of a charge.

        ``limit``, ``before`` and ``after`` are sent as query parameters.
        """
        require_string("charge_id", charge_id)
        query = prepare_optional_data(READ_PARAMETERS, optional_data)
        query_string = f"?{urlencode(query)}" if query else ""
        return self._request("GET", f"{self.base_url}charges/{charge_id}{query_string}")

    def void(self, charge_id: str) -> Dict[str, Any]:
        """Cancel an authorized charge that has not been captured."""
        require_string("charge_id", charge_id)
        return self._request("POST", f"{self.base_url}charges/{charge_id}/void")

    def refund(
        self,
        charge_id: str,
        optional_data: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Refund a captured charge, fully or by ``amount`` (in cents).
        """
        require_string("charge_id", charge_id)
        body = prepare_optional_data(REFUND_PARAMETERS, optional_data)
        return self._request("POST", f"{self.base_url}charges/{charge_id}/refund", body)

    def _request(
        self,
        method: str,
        url: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        options: Dict[str, Any] = {"auth": self.config.auth}
        if body:
            options["json"] = body

        logging.info("Sending %s request to %s", method, url)
        try:
            response = self.session.request(method, url, **options)
            response.raise_for_status()
        except requests.RequestException as exc:
            status_code = _status_code_of(exc)
            logging.warning(
                "Affirm request %s %s failed (status %s): %s",
                method,
                url,
                status_code,
                exc,
            )
            raise ResponseError(
                str(exc),
                status_code=status_code,
                body=_body_of(exc),
            ) from exc

        response_body = response.text
        try:
            payload = json.loads(response_body)
        except ValueError as exc:
            raise ResponseError(
                "Json could not be decoded from affirm response. "
                f"Response body: {response_body}",
                status_code=response.status_code,
                body=response_body,
            ) from exc

        if not isinstance(payload, dict):
            raise ResponseError(
                "Expected a json object from affirm response. "
                f"Response body: {response_body}",
                status_code=response.status_code,
                body=response_body,
            )
        return payload
