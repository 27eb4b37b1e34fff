"""Portfolio project API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user, get_project_service, require_ownership
from src.api.errors import ValidationFailed
from src.api.sites import get_owned_site
from src.api.updates import apply_partial_update
from src.database import get_db
from src.models.project import Project
from src.models.user import User
from src.schemas.asset import AssetResponse
from src.schemas.envelope import DataResponse, ListResponse
from src.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from src.services.ownership import check_ownership, project_lookup
from src.services.partial_update import UpdatableFields
from src.services.project_service import ProjectService
from src.services.storage import (
    InvalidUploadError,
    delete_stored_file,
    save_image_upload,
    storage_url,
)

router = APIRouter(prefix="/api/sites/{site_id}/projects", tags=["projects"])

PROJECT_FIELDS = UpdatableFields(
    table=Project.__table__,
    key="project_id",
    schema=ProjectUpdate,
    columns={name: name for name in ProjectUpdate.model_fields},
    protected=frozenset({"id", "project_id", "site_id", "created_at", "updated_at"}),
)


def get_owned_project(db: Session, site_id: str, project_id: str, user: User) -> Project:
    """Get a project under a site the user owns, or raise 404/403."""
    check = check_ownership(db, project_lookup(site_id, project_id), user.id)
    return require_ownership(check, "Project")


@router.get("", response_model=ListResponse[ProjectResponse])
def list_projects(
    site_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List a site's projects in display order."""
    get_owned_site(db, site_id, current_user)

    projects = (
        db.query(Project)
        .filter(Project.site_id == site_id)
        .order_by(Project.order_index.asc(), Project.created_at.desc())
        .all()
    )
    return ListResponse(
        data=[ProjectResponse.model_validate(p) for p in projects], total=len(projects)
    )


@router.post("", response_model=DataResponse[ProjectResponse], status_code=status.HTTP_201_CREATED)
def create_project(
    site_id: str,
    project_data: ProjectCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    """Add a project to a site."""
    get_owned_site(db, site_id, current_user)
    project = project_service.create_project(site_id, project_data)
    return DataResponse(data=ProjectResponse.model_validate(project))


@router.put("/{project_id}", response_model=DataResponse[ProjectResponse])
def update_project(
    site_id: str,
    project_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a project. Only keys present in the body are changed."""
    project = get_owned_project(db, site_id, project_id, current_user)
    apply_partial_update(db, PROJECT_FIELDS, project_id, payload)
    db.refresh(project)
    return DataResponse(data=ProjectResponse.model_validate(project))


@router.delete("/{project_id}", response_model=DataResponse[ProjectResponse])
def delete_project(
    site_id: str,
    project_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    """Delete a project together with its image assets."""
    project = get_owned_project(db, site_id, project_id, current_user)
    deleted = ProjectResponse.model_validate(project)
    project_service.delete_project(project)
    return DataResponse(data=deleted)


@router.post(
    "/{project_id}/images",
    response_model=DataResponse[AssetResponse],
    status_code=status.HTTP_201_CREATED,
)
async def upload_project_image(
    site_id: str,
    project_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
    image: Annotated[UploadFile | None, File(description="Project image")] = None,
    alt_text: Annotated[str | None, Form()] = None,
):
    """Upload an image for a project and append it to the project's images.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    if image is None:
        raise ValidationFailed("No image file provided", "NO_IMAGE_FILE")

    project = get_owned_project(db, site_id, project_id, current_user)

    try:
        filename = await save_image_upload(image)
    except InvalidUploadError as e:
        raise ValidationFailed(str(e), e.error_code) from None

    try:
        asset = project_service.add_project_image(
            project, storage_url(filename), alt_text, storage_filename=filename
        )
    except Exception:
        delete_stored_file(filename)
        raise
    return DataResponse(data=AssetResponse.model_validate(asset))
