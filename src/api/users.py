"""Public user profile endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.errors import NotFound
from src.database import get_db
from src.models.user import User
from src.schemas.auth import PublicUserResponse
from src.schemas.envelope import DataResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=DataResponse[PublicUserResponse])
def get_public_profile(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """Get a user's public profile. No authentication required."""
    user = db.query(User).filter(User.id == user_id, User.is_active.is_(True)).first()
    if not user:
        raise NotFound("User not found", "USER_NOT_FOUND")

    return DataResponse(data=PublicUserResponse.model_validate(user))
