"""Portfolio site API endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user, get_site_service, require_ownership
from src.api.errors import InternalFailure, ValidationFailed
from src.api.updates import apply_partial_update, execute_update, parse_changes
from src.database import get_db
from src.models.site import PortfolioSite
from src.models.user import User
from src.schemas.dashboard import ExportData
from src.schemas.envelope import DataResponse, ListResponse
from src.schemas.site import (
    AboutUpdate,
    HeroUpdate,
    SeoUpdate,
    SiteCreate,
    SiteResponse,
    SiteUpdate,
    ThemeUpdate,
)
from src.services.ownership import check_ownership, site_lookup
from src.services.partial_update import UpdatableFields
from src.services.site_service import SiteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sites", tags=["sites"])

SITE_PROTECTED_KEYS = frozenset(
    {"site_id", "user_id", "created_at", "updated_at", "published_at", "export_zip_url"}
)

SITE_SETTINGS_FIELDS = UpdatableFields(
    table=PortfolioSite.__table__,
    key="site_id",
    schema=SiteUpdate,
    columns={name: name for name in SiteUpdate.model_fields},
    protected=SITE_PROTECTED_KEYS,
)

HERO_FIELDS = UpdatableFields(
    table=PortfolioSite.__table__,
    key="site_id",
    schema=HeroUpdate,
    columns={"title": "site_title", "tagline": "tagline", "hero_image_url": "hero_image_url"},
    protected=SITE_PROTECTED_KEYS,
)

ABOUT_FIELDS = UpdatableFields(
    table=PortfolioSite.__table__,
    key="site_id",
    schema=AboutUpdate,
    columns={"bio": "about_text"},  # avatar_url goes to the owner's profile
    protected=SITE_PROTECTED_KEYS,
)

SEO_FIELDS = UpdatableFields(
    table=PortfolioSite.__table__,
    key="site_id",
    schema=SeoUpdate,
    columns={"seo_title": "seo_title", "seo_description": "seo_description"},
    protected=SITE_PROTECTED_KEYS,
)

THEME_FIELDS = UpdatableFields(
    table=PortfolioSite.__table__,
    key="site_id",
    schema=ThemeUpdate,
    columns={name: name for name in ThemeUpdate.model_fields},
    protected=SITE_PROTECTED_KEYS,
)


def get_owned_site(db: Session, site_id: str, user: User) -> PortfolioSite:
    """Get a site owned by the user, or raise 404/403."""
    check = check_ownership(db, site_lookup(site_id), user.id)
    return require_ownership(check, "Site")


def update_site_section(
    db: Session, site_id: str, user: User, fields: UpdatableFields, payload: dict[str, Any]
) -> DataResponse[SiteResponse]:
    """Apply an allow-listed partial update to a site the user owns."""
    site = get_owned_site(db, site_id, user)
    apply_partial_update(db, fields, site_id, payload)
    db.refresh(site)
    return DataResponse(data=SiteResponse.model_validate(site))


@router.post("", response_model=DataResponse[SiteResponse], status_code=status.HTTP_201_CREATED)
def create_site(
    site_data: SiteCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    site_service: Annotated[SiteService, Depends(get_site_service)],
):
    """Create a new portfolio site for the current user."""
    site = site_service.create_site(current_user.id, current_user.username, site_data)
    return DataResponse(data=SiteResponse.model_validate(site))


@router.get("", response_model=ListResponse[SiteResponse])
def list_sites(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the current user's sites, newest first."""
    sites = (
        db.query(PortfolioSite)
        .filter(PortfolioSite.user_id == current_user.id)
        .order_by(PortfolioSite.created_at.desc())
        .all()
    )
    return ListResponse(data=[SiteResponse.model_validate(s) for s in sites], total=len(sites))


@router.get("/{site_id}", response_model=DataResponse[SiteResponse])
def get_site(
    site_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a site."""
    site = get_owned_site(db, site_id, current_user)
    return DataResponse(data=SiteResponse.model_validate(site))


@router.put("/{site_id}", response_model=DataResponse[SiteResponse])
def update_site(
    site_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update site settings. Only keys present in the body are changed."""
    try:
        return update_site_section(db, site_id, current_user, SITE_SETTINGS_FIELDS, payload)
    except IntegrityError:
        db.rollback()
        raise ValidationFailed("Subdomain is already taken", "SUBDOMAIN_TAKEN") from None


@router.put("/{site_id}/publish", response_model=DataResponse[SiteResponse])
def publish_site(
    site_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    site_service: Annotated[SiteService, Depends(get_site_service)],
):
    """Publish a site (sets published_at to now)."""
    site = get_owned_site(db, site_id, current_user)
    site = site_service.publish_site(site)
    return DataResponse(data=SiteResponse.model_validate(site))


@router.post("/{site_id}/export", response_model=DataResponse[ExportData])
def export_site(
    site_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    site_service: Annotated[SiteService, Depends(get_site_service)],
):
    """Export a site as a downloadable ZIP archive."""
    site = get_owned_site(db, site_id, current_user)
    try:
        export_zip_url = site_service.export_site(site)
    except OSError as e:
        logger.error(f"Export of site {site_id} failed: {e}")
        raise InternalFailure("Failed to generate export", "EXPORT_GENERATION_FAILED") from e

    return DataResponse(data=ExportData(export_zip_url=export_zip_url, export_path=export_zip_url))


@router.put("/{site_id}/hero", response_model=DataResponse[SiteResponse])
def update_hero(
    site_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update the hero section (title, tagline, hero image)."""
    return update_site_section(db, site_id, current_user, HERO_FIELDS, payload)


@router.put("/{site_id}/about", response_model=DataResponse[SiteResponse])
def update_about(
    site_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update the about text and, when given, the owner's avatar."""
    site = get_owned_site(db, site_id, current_user)
    changes = parse_changes(ABOUT_FIELDS, payload)
    avatar_url = changes.values.get("avatar_url")

    if not changes.assignments and not avatar_url:
        raise ValidationFailed("No valid fields to update", "NO_UPDATE_FIELDS")

    # Site and avatar change together or not at all
    try:
        if changes.assignments:
            execute_update(db, ABOUT_FIELDS, site_id, changes)
        if avatar_url:
            current_user.avatar_url = avatar_url
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(site)
    return DataResponse(data=SiteResponse.model_validate(site))


@router.put("/{site_id}/seo", response_model=DataResponse[SiteResponse])
def update_seo(
    site_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update SEO title and description."""
    return update_site_section(db, site_id, current_user, SEO_FIELDS, payload)


@router.put("/{site_id}/theme", response_model=DataResponse[SiteResponse])
def update_theme(
    site_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update template, colors and typography."""
    return update_site_section(db, site_id, current_user, THEME_FIELDS, payload)
