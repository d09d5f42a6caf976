"""Connectivity check between the bridge, the tenant's IdP and the workflow engine."""

from __future__ import annotations

from usertasks.client.base import BaseController


class InitController(BaseController):
    async def check_connection(self) -> None:
        """GET /init; raises the classified error when the integration is broken."""
        await self._transport.request("/init")
