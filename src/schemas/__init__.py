"""Pydantic schemas for API requests and responses."""

from src.schemas.asset import AssetReferenceCreate, AssetResponse, AssetUpdate
from src.schemas.auth import AuthData, PublicUserResponse, UserLogin, UserRegister, UserResponse
from src.schemas.contact import ContactSubmissionCreate, ContactSubmissionResponse
from src.schemas.envelope import DataResponse, ErrorResponse, ListResponse
from src.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from src.schemas.site import (
    AboutUpdate,
    HeroUpdate,
    SeoUpdate,
    SiteCreate,
    SiteResponse,
    SiteUpdate,
    ThemeUpdate,
)

__all__ = [
    "DataResponse",
    "ListResponse",
    "ErrorResponse",
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "PublicUserResponse",
    "AuthData",
    "SiteCreate",
    "SiteUpdate",
    "HeroUpdate",
    "AboutUpdate",
    "SeoUpdate",
    "ThemeUpdate",
    "SiteResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "AssetReferenceCreate",
    "AssetUpdate",
    "AssetResponse",
    "ContactSubmissionCreate",
    "ContactSubmissionResponse",
]
