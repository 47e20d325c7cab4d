"""Address API router, nested under a contact."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.contact_api.api.http.deps import get_address_service, get_current_user
from src.contact_api.core.models import AddressResponse, WebResponse
from src.contact_api.core.services import AddressService
from src.contact_api.entities.core.user import User

router = APIRouter(
    prefix="/contacts/{contact_id}/addresses",
    tags=["addresses"],
    dependencies=[Depends(get_current_user)],
)


@router.post("", response_model=WebResponse[AddressResponse])
def create_address(
    contact_id: str,
    payload: Any = Body(default=None),
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service),
) -> WebResponse[AddressResponse]:
    """Add an address to one of the user's contacts."""
    return WebResponse(data=service.create(user, contact_id, payload))


@router.get("", response_model=WebResponse[list[AddressResponse]])
def list_addresses(
    contact_id: str,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service),
) -> WebResponse[list[AddressResponse]]:
    """List every address of a contact."""
    return WebResponse(data=service.list_all(user, contact_id))


@router.get("/{address_id}", response_model=WebResponse[AddressResponse])
def get_address(
    contact_id: str,
    address_id: str,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service),
) -> WebResponse[AddressResponse]:
    """Get one address of a contact."""
    return WebResponse(data=service.get(user, contact_id, address_id))


@router.put("/{address_id}", response_model=WebResponse[AddressResponse])
def update_address(
    contact_id: str,
    address_id: str,
    payload: Any = Body(default=None),
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service),
) -> WebResponse[AddressResponse]:
    """Replace the mutable fields of an address."""
    return WebResponse(data=service.update(user, contact_id, address_id, payload))


@router.delete("/{address_id}", response_model=WebResponse[str])
def delete_address(
    contact_id: str,
    address_id: str,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service),
) -> WebResponse[str]:
    """Delete an address."""
    service.remove(user, contact_id, address_id)
    return WebResponse(data="OK")
