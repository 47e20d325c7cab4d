"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from loguru import logger
from sqlmodel import Session

from src.contact_api.api.http.app_data import ApplicationDependencies
from src.contact_api.core.errors import UnauthorizedError
from src.contact_api.core.services import (
    AddressService,
    ContactService,
    UserManagementService,
)
from src.contact_api.entities.core.user import User, UserRepository
from src.contact_api.runtime.context import get_config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_current_user(request: Request, db: Session = Depends(get_db_session)) -> User:
    """Authenticate the request from its API token header.

    The user whose stored token equals the header value exactly is attached
    to ``request.state.user``; anything else is rejected with 401.
    """
    header_name = get_config().security.token_header
    token = request.headers.get(header_name)
    if not token:
        logger.info("Rejected request without {} header", header_name)
        raise UnauthorizedError()

    user = UserRepository(db).get_by_token(token)
    if user is None:
        logger.info("Rejected request with unknown API token")
        raise UnauthorizedError()

    request.state.user = user
    return user


def get_contact_service(db: Session = Depends(get_db_session)) -> ContactService:
    return ContactService(db)


def get_address_service(db: Session = Depends(get_db_session)) -> AddressService:
    return AddressService(db)


def get_user_management_service(
    db: Session = Depends(get_db_session),
) -> UserManagementService:
    return UserManagementService(db)
