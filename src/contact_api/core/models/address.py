"""Request and response models for addresses."""

from pydantic import BaseModel, ConfigDict, Field

from src.contact_api.entities.service.address import Address

from ._common import optional_text


class AddressRequest(BaseModel):
    """Body of the address create and update endpoints."""

    model_config = ConfigDict(str_strip_whitespace=True)

    street: optional_text(255) = None
    city: optional_text(100) = None
    province: optional_text(100) = None
    country: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=10)


class AddressResponse(BaseModel):
    """Public view of an address."""

    id: str
    street: str | None = None
    city: str | None = None
    province: str | None = None
    country: str
    postal_code: str

    @classmethod
    def from_entity(cls, address: Address) -> "AddressResponse":
        return cls.model_validate(address, from_attributes=True)
