"""Async HTTP client for the remote retirement calculator."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import structlog

from retirement_client.config.settings import ClientSettings
from retirement_client.core.errors import ResponseShapeError, ServerError, TransportError
from retirement_client.schemas.calculation import CalculationRequest

logger = structlog.get_logger(__name__)


def _json_object(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class CalculationClient:
    """Issues one POST per calculation; no retries, failures surface at once.

    An ``httpx.AsyncClient`` can be injected (tests pass one backed by
    ``httpx.MockTransport``). A client created here is closed by :meth:`aclose`;
    an injected one is left to its owner.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._owns_client = http_client is None
        if http_client is None:
            options: Dict[str, Any] = {"base_url": self._settings.base_url}
            if self._settings.timeout is not None:
                options["timeout"] = self._settings.timeout
            http_client = httpx.AsyncClient(**options)
        self._http = http_client

    async def __aenter__(self) -> "CalculationClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def calculate(self, request: CalculationRequest) -> Dict[str, Any]:
        """POST the request and return the parsed JSON body.

        Raises:
            TransportError: no usable response was received (connection,
                timeout, redirect loop or an undecodable body).
            ServerError: the calculator answered with status >= 400.
            ResponseShapeError: a 2xx body that is not a JSON object.
        """
        path = self._settings.endpoint_path
        logger.debug("calculation_request_sent", path=path, **request.to_payload())
        try:
            response = await self._http.post(path, json=request.to_payload())
        except httpx.HTTPError as exc:
            logger.warning("calculation_transport_failed", path=path, error=str(exc))
            raise TransportError(str(exc)) from exc

        if response.is_error:
            error = ServerError(response.status_code, _json_object(response))
            logger.warning(
                "calculation_server_failed",
                status=response.status_code,
                field_errors=error.field_errors,
            )
            raise error

        body = _json_object(response)
        if body is None:
            logger.warning("response_contract_violation", status=response.status_code)
            raise ResponseShapeError("body is not a JSON object")
        return body

    async def health(self) -> str:
        """Return the calculator's health probe text."""
        try:
            response = await self._http.get(self._settings.health_path)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc)) from exc
        if response.is_error:
            raise ServerError(response.status_code, _json_object(response))
        return response.text
