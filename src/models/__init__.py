"""SQLAlchemy models."""

from src.models.asset import ImageAsset
from src.models.contact import ContactSubmission
from src.models.project import Project
from src.models.site import PortfolioSite
from src.models.user import Role, User, user_roles

__all__ = [
    "User",
    "Role",
    "user_roles",
    "PortfolioSite",
    "Project",
    "ImageAsset",
    "ContactSubmission",
]
