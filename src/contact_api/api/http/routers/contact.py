"""Contact API router with CRUD and search operations."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from src.contact_api.api.http.deps import get_contact_service, get_current_user
from src.contact_api.core.models import ContactResponse, PageResponse, WebResponse
from src.contact_api.core.services import ContactService
from src.contact_api.entities.core.user import User

router = APIRouter(
    prefix="/contacts", tags=["contacts"], dependencies=[Depends(get_current_user)]
)


@router.post("", response_model=WebResponse[ContactResponse])
def create_contact(
    payload: Any = Body(default=None),
    user: User = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
) -> WebResponse[ContactResponse]:
    """Create a contact owned by the authenticated user."""
    return WebResponse(data=service.create(user, payload))


@router.get("", response_model=PageResponse[ContactResponse])
def search_contacts(
    name: str | None = Query(default=None),
    email: str | None = Query(default=None),
    phone: str | None = Query(default=None),
    page: str | None = Query(default=None),
    size: str | None = Query(default=None),
    user: User = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
) -> PageResponse[ContactResponse]:
    """Search the authenticated user's contacts, one page at a time."""
    params = {
        key: value
        for key, value in {
            "name": name,
            "email": email,
            "phone": phone,
            "page": page,
            "size": size,
        }.items()
        if value is not None
    }
    return service.search(user, params)


@router.get("/{contact_id}", response_model=WebResponse[ContactResponse])
def get_contact(
    contact_id: str,
    user: User = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
) -> WebResponse[ContactResponse]:
    """Get a contact by ID."""
    return WebResponse(data=service.get(user, contact_id))


@router.put("/{contact_id}", response_model=WebResponse[ContactResponse])
def update_contact(
    contact_id: str,
    payload: Any = Body(default=None),
    user: User = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
) -> WebResponse[ContactResponse]:
    """Replace the mutable fields of a contact."""
    return WebResponse(data=service.update(user, contact_id, payload))


@router.delete("/{contact_id}", response_model=WebResponse[str])
def delete_contact(
    contact_id: str,
    user: User = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
) -> WebResponse[str]:
    """Delete a contact together with its addresses."""
    service.remove(user, contact_id)
    return WebResponse(data="OK")
