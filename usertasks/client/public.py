"""Tenant configuration discovery."""

from __future__ import annotations

from usertasks.client.base import BaseController
from usertasks.schemas.public import IdentityProviderListDTO


class PublicController(BaseController):
    async def get_identity_provider_config(self) -> IdentityProviderListDTO:
        """Public configuration of the IdP(s) the tenant authenticates with."""
        data = await self._transport.request("/config")
        return IdentityProviderListDTO.model_validate(data)
