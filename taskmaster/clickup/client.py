"""ClickUp REST client.

One ``httpx.AsyncClient`` per call, exactly one request per call, no retries.
Any non-success status becomes an ``UpstreamError`` carrying the status code
and the raw response body.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

import httpx

from taskmaster.config import Settings
from taskmaster.exceptions import UpstreamError
from taskmaster.logger import Logger, session_logger

QueryParams = Union[Mapping[str, Any], Sequence[Tuple[str, Any]]]


class ClickUpClient:
    """Issues authenticated requests against the ClickUp API."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            settings: Service settings (base URL, timeout, auth scheme)
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
            logger: Logger for request events
        """
        self.settings = settings
        self.transport = transport
        self.logger: Logger = logger or session_logger

    def _headers(self, token: str) -> Dict[str, str]:
        return {
            "Authorization": self.settings.authorization_header(token),
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        token: str,
        params: Optional[QueryParams] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform one request and return the parsed JSON body.

        Raises:
            UpstreamError: on a non-2xx response or when ClickUp cannot be reached
        """
        self.logger.debug("ClickUp request", method=method, path=path)
        try:
            async with httpx.AsyncClient(
                base_url=self.settings.api_url,
                timeout=self.settings.request_timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(
                    method, path, params=params, json=json, headers=self._headers(token)
                )
        except httpx.HTTPError as exc:
            self.logger.error("ClickUp request failed", method=method, path=path, error=str(exc))
            raise UpstreamError(status_code=None, body=str(exc)) from exc

        if not response.is_success:
            self.logger.warning(
                "ClickUp returned an error",
                method=method,
                path=path,
                status=response.status_code,
            )
            raise UpstreamError(status_code=response.status_code, body=response.text)

        self.logger.debug("ClickUp response", method=method, path=path, status=response.status_code)
        if not response.content:
            return {}
        return response.json()

    async def get(self, path: str, token: str, params: Optional[QueryParams] = None) -> Any:
        return await self.request("GET", path, token, params=params)

    async def post(self, path: str, token: str, json: Dict[str, Any]) -> Any:
        return await self.request("POST", path, token, json=json)

    async def put(self, path: str, token: str, json: Dict[str, Any]) -> Any:
        return await self.request("PUT", path, token, json=json)
