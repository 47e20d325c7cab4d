"""Current-user endpoints."""

from fastapi import APIRouter, Depends

from src.contact_api.api.http.deps import (
    get_current_user,
    get_user_management_service,
)
from src.contact_api.core.models import UserResponse, WebResponse
from src.contact_api.core.services import UserManagementService
from src.contact_api.entities.core.user import User

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(get_current_user)]
)


@router.get("/current", response_model=WebResponse[UserResponse])
def get_current(
    user: User = Depends(get_current_user),
    service: UserManagementService = Depends(get_user_management_service),
) -> WebResponse[UserResponse]:
    """Return the authenticated user."""
    return WebResponse(data=service.current(user))


@router.delete("/current", response_model=WebResponse[str])
def logout(
    user: User = Depends(get_current_user),
    service: UserManagementService = Depends(get_user_management_service),
) -> WebResponse[str]:
    """Log out by clearing the user's API token."""
    service.logout(user)
    return WebResponse(data="OK")
