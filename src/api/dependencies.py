"""FastAPI dependencies for authentication, ownership and services."""

from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.api.errors import AccessDenied, AuthenticationFailed, NotFound
from src.database import get_db
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.ownership import Ownership, OwnershipCheck
from src.services.project_service import ProjectService
from src.services.site_service import SiteService

# Missing credentials are reported by get_current_user as a 401 envelope
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise AuthenticationFailed("Access token required", "AUTH_TOKEN_MISSING")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthenticationFailed("Invalid or expired token", "AUTH_TOKEN_INVALID")

    user_id = payload.get("sub")
    if user_id is None:
        raise AuthenticationFailed("Invalid or expired token", "AUTH_TOKEN_INVALID")

    user = db.query(User).filter(User.id == str(user_id), User.is_active.is_(True)).first()
    if user is None:
        raise AuthenticationFailed("Invalid token - user not found", "AUTH_USER_NOT_FOUND")

    return user


def require_ownership(check: OwnershipCheck, resource_name: str) -> Any:
    """Turn an ownership decision into the resource or a 404/403."""
    if check.decision == Ownership.NOT_FOUND:
        raise NotFound(f"{resource_name} not found", f"{resource_name.upper()}_NOT_FOUND")
    if check.decision == Ownership.DENIED:
        raise AccessDenied("Access denied")
    return check.resource


def get_site_service(
    db: Annotated[Session, Depends(get_db)],
) -> SiteService:
    """Get site service with dependencies."""
    return SiteService(db)


def get_project_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProjectService:
    """Get project service with dependencies."""
    return ProjectService(db)
