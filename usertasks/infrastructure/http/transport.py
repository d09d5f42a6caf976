"""Authenticated HTTP transport for the User Tasks Bridge API.

All calls go to ``{base_url}/{tenant_id}{path}`` with a bearer token and
use httpx.AsyncClient, so they never block the event loop. No retries,
no caching; connection pooling is whatever httpx provides.
"""

from __future__ import annotations

from typing import Any

import httpx

from usertasks.infrastructure.http.errors import error_from_response
from usertasks.shared.telemetry.logging import get_logger
from usertasks.shared.telemetry.tracing import add_span_attributes, traced

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class UserTasksTransport:
    """Tenant-scoped, token-authenticated request sender.

    The access token is supplied by the embedding application and is
    never refreshed, validated, logged or traced here.
    """

    def __init__(
        self,
        base_url: str,
        tenant_id: str,
        access_token: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        if not tenant_id:
            raise ValueError("tenant_id is required")
        if not access_token:
            raise ValueError("access_token is required")
        self._base_url = base_url.rstrip("/")
        self._tenant_id = tenant_id
        self._access_token = access_token
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def tenant_id(self) -> str:
        return self._tenant_id

    def url_for(self, path: str) -> str:
        """Absolute URL of a tenant-relative path (path starts with '/')."""
        return f"{self._base_url}/{self._tenant_id}{path}"

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    @traced("utb.request")
    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and decode the response.

        Args:
            path: Tenant-relative path including any query string.
            method: HTTP method.
            json: JSON-serializable request body, or None.
            headers: Extra headers; Authorization and Content-Type always win.

        Returns:
            Decoded JSON for application/json responses, None for empty or
            untyped responses (e.g. 204), otherwise the raw httpx.Response.

        Raises:
            UserTasksException: Subclass chosen by the error classifier for
                any non-2xx response.
            httpx.TransportError: Network failures, unchanged.
        """
        url = self.url_for(path)
        merged_headers = {
            **(headers or {}),
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }
        add_span_attributes(
            **{"http.method": method, "utb.path": path, "utb.tenant_id": self._tenant_id}
        )
        try:
            resp = await self._http.request(method, url, headers=merged_headers, json=json)
        except httpx.TransportError as e:
            logger.error("Bridge request failed: %s %s: %s", method, path, e)
            raise
        add_span_attributes(**{"http.status_code": resp.status_code})

        if not resp.is_success:
            error = error_from_response(resp)
            logger.warning(
                "Bridge API error: %s %s -> %s %s: %s",
                method,
                path,
                resp.status_code,
                error.error_code,
                error.message,
            )
            raise error

        content_type = resp.headers.get("content-type")
        if content_type and "application/json" in content_type:
            return resp.json() if resp.content else None
        if resp.status_code == 204 or not content_type:
            return None
        return resp
