"""Authentication and user schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, model_validator

# Clients send the plaintext password under "password_hash"; "password" is accepted too.
PASSWORD_FIELD = AliasChoices("password_hash", "password")


class UserRegister(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=72, validation_alias=PASSWORD_FIELD)
    full_name: str | None = Field(None, max_length=100)
    avatar_url: str | None = None


class UserLogin(BaseModel):
    """User login request by username or email."""

    username: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str = Field(..., min_length=1, max_length=72, validation_alias=PASSWORD_FIELD)

    @model_validator(mode="after")
    def require_identifier(self) -> "UserLogin":
        """Either username or email must be given."""
        if not (self.username or self.email):
            raise ValueError("Username or email is required")
        return self

    @property
    def identifier(self) -> str:
        return (self.username or self.email or "").strip()


class UserResponse(BaseModel):
    """Authenticated user's own profile."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    full_name: str | None
    avatar_url: str | None
    is_active: bool
    created_at: datetime


class PublicUserResponse(BaseModel):
    """Publicly visible profile fields."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    full_name: str | None
    avatar_url: str | None
    is_active: bool
    created_at: datetime


class AuthData(BaseModel):
    """Authentication result with token and user info."""

    user: UserResponse
    token: str


class LogoutData(BaseModel):
    """Logout acknowledgement."""

    success: bool = True
