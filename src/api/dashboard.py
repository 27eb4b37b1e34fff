"""Dashboard API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.api.errors import ValidationFailed
from src.api.sites import get_owned_site
from src.config import get_settings
from src.database import get_db
from src.models.contact import ContactSubmission
from src.models.project import Project
from src.models.site import PortfolioSite
from src.models.user import User
from src.schemas.contact import ContactSubmissionResponse
from src.schemas.dashboard import ExportData, PreviewData
from src.schemas.envelope import DataResponse, ListResponse
from src.schemas.project import ProjectResponse

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

MAX_PAGE = 10_000


@router.get("/projects", response_model=ListResponse[ProjectResponse])
def search_projects(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    site_id: str | None = Query(default=None, description="Site to list projects for"),
    search_query: str | None = Query(default=None, description="Match title or description"),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    page_size: int = Query(default=10, ge=1, le=100),
):
    """Search and paginate a site's projects. total counts all matches."""
    if not site_id:
        raise ValidationFailed("Site ID is required", "MISSING_SITE_ID")

    get_owned_site(db, site_id, current_user)

    query = db.query(Project).filter(Project.site_id == site_id)
    if search_query:
        pattern = f"%{search_query}%"
        query = query.filter(or_(Project.title.ilike(pattern), Project.description.ilike(pattern)))

    total = query.count()
    projects = (
        query.order_by(Project.order_index.asc(), Project.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return ListResponse(data=[ProjectResponse.model_validate(p) for p in projects], total=total)


@router.get("/submissions", response_model=ListResponse[ContactSubmissionResponse])
def list_submissions(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List contact submissions for all of the current user's sites, newest first."""
    submissions = (
        db.query(ContactSubmission)
        .join(PortfolioSite, ContactSubmission.site_id == PortfolioSite.site_id)
        .filter(PortfolioSite.user_id == current_user.id)
        .order_by(ContactSubmission.created_at.desc())
        .all()
    )
    return ListResponse(
        data=[ContactSubmissionResponse.model_validate(s) for s in submissions],
        total=len(submissions),
    )


@router.get("/preview", response_model=DataResponse[PreviewData])
def get_preview(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    site_id: str | None = Query(default=None),
):
    """Preview URL for a site, or the placeholder when no site is given."""
    settings = get_settings()
    url = settings.preview_placeholder_url

    if site_id:
        site = get_owned_site(db, site_id, current_user)
        if site.subdomain:
            url = f"https://{site.subdomain}.{settings.site_domain}"

    return DataResponse(data=PreviewData(status="ready", url=url))


@router.get("/export", response_model=DataResponse[ExportData])
def get_export_status(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    site_id: str | None = Query(default=None),
):
    """Latest export archive for a site, or for any of the user's sites."""
    if site_id:
        export_zip_url = get_owned_site(db, site_id, current_user).export_zip_url
    else:
        latest = (
            db.query(PortfolioSite.export_zip_url)
            .filter(
                PortfolioSite.user_id == current_user.id,
                PortfolioSite.export_zip_url.is_not(None),
            )
            .order_by(PortfolioSite.updated_at.desc())
            .first()
        )
        export_zip_url = latest[0] if latest else None

    return DataResponse(data=ExportData(export_zip_url=export_zip_url, export_path=export_zip_url))
