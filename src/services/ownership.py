"""Ownership resolution for sites and the resources they own."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from src.models.asset import ImageAsset
from src.models.project import Project
from src.models.site import PortfolioSite


class Ownership(str, Enum):
    """Outcome of an ownership check."""

    ALLOWED = "allowed"
    NOT_FOUND = "not_found"
    DENIED = "denied"


@dataclass
class OwnershipCheck:
    """Decision plus the resource that was looked up (None when not found)."""

    decision: Ownership
    resource: Any | None = None

    @property
    def allowed(self) -> bool:
        return self.decision == Ownership.ALLOWED


def check_ownership(db: Session, lookup: Select, principal_id: str) -> OwnershipCheck:
    """Run a single (resource, owner_id) lookup and compare the owner with the principal.

    Database errors propagate unchanged.
    """
    row = db.execute(lookup).first()
    if row is None:
        return OwnershipCheck(Ownership.NOT_FOUND)

    resource, owner_id = row
    if owner_id != principal_id:
        return OwnershipCheck(Ownership.DENIED, resource)
    return OwnershipCheck(Ownership.ALLOWED, resource)


def site_lookup(site_id: str) -> Select:
    """Site and its owner."""
    return select(PortfolioSite, PortfolioSite.user_id).where(PortfolioSite.site_id == site_id)


def project_lookup(site_id: str, project_id: str) -> Select:
    """Project under the given site, with the site's owner."""
    return (
        select(Project, PortfolioSite.user_id)
        .join(PortfolioSite, Project.site_id == PortfolioSite.site_id)
        .where(Project.project_id == project_id, Project.site_id == site_id)
    )


def asset_lookup(site_id: str, asset_id: str) -> Select:
    """Asset under the given site, with the site's owner."""
    return (
        select(ImageAsset, PortfolioSite.user_id)
        .join(PortfolioSite, ImageAsset.site_id == PortfolioSite.site_id)
        .where(ImageAsset.image_id == asset_id, ImageAsset.site_id == site_id)
    )
