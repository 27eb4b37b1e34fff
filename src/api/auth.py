"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.api.errors import AuthenticationFailed, ValidationFailed
from src.database import get_db
from src.models.user import User
from src.schemas.auth import AuthData, LogoutData, UserLogin, UserRegister, UserResponse
from src.schemas.envelope import DataResponse
from src.services.auth import (
    UserAlreadyExistsError,
    authenticate_user,
    create_access_token,
    create_user,
    user_exists,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register", response_model=DataResponse[AuthData], status_code=status.HTTP_201_CREATED
)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new portfolio owner."""
    if user_exists(db, user_data.username, user_data.email):
        raise ValidationFailed(
            "User with this username or email already exists", "USER_ALREADY_EXISTS"
        )

    try:
        user = create_user(db, user_data)
    except UserAlreadyExistsError:
        # Lost a race with a concurrent registration
        raise ValidationFailed(
            "User with this username or email already exists", "USER_ALREADY_EXISTS"
        ) from None
    token = create_access_token(user.id, user.email)

    return DataResponse(data=AuthData(user=UserResponse.model_validate(user), token=token))


@router.post("/login", response_model=DataResponse[AuthData])
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with username or email and password."""
    user = authenticate_user(db, credentials.identifier, credentials.password)

    if not user:
        raise AuthenticationFailed("Invalid credentials", "INVALID_CREDENTIALS")

    token = create_access_token(user.id, user.email)

    return DataResponse(data=AuthData(user=UserResponse.model_validate(user), token=token))


@router.get("/me", response_model=DataResponse[UserResponse])
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return DataResponse(data=UserResponse.model_validate(current_user))


@router.post("/logout", response_model=DataResponse[LogoutData])
async def logout(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Logout (client should discard token)."""
    return DataResponse(data=LogoutData())
