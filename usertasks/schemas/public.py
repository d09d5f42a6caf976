"""Public identity-provider configuration DTOs."""

from pydantic import Field

from usertasks.domain.enums import IdentityProviderVendor
from usertasks.schemas.base import WireModel


class IdentityProviderDTO(WireModel):
    vendor: IdentityProviderVendor
    label_name: str
    issuer: str
    client_id: str
    authorities: list[str] = Field(default_factory=list)


class IdentityProviderListDTO(WireModel):
    providers: list[IdentityProviderDTO] = Field(default_factory=list)
