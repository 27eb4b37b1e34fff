"""Site asset API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile

from src.api.dependencies import get_current_user, require_ownership
from src.api.errors import ValidationFailed
from src.api.sites import get_owned_site
from src.api.updates import apply_partial_update
from src.database import get_db
from src.models.asset import ImageAsset
from src.models.user import User
from src.schemas.asset import AssetReferenceCreate, AssetResponse, AssetUpdate
from src.schemas.envelope import DataResponse
from src.services.ownership import asset_lookup, check_ownership
from src.services.partial_update import UpdatableFields
from src.services.storage import (
    InvalidUploadError,
    delete_stored_file,
    save_image_upload,
    storage_url,
)

router = APIRouter(prefix="/api/sites/{site_id}/assets", tags=["assets"])

ASSET_FIELDS = UpdatableFields(
    table=ImageAsset.__table__,
    key="image_id",
    schema=AssetUpdate,
    columns={"url": "url", "alt_text": "alt_text"},
    protected=frozenset({"image_id", "site_id", "project_id", "storage_filename", "uploaded_at"}),
)


def get_owned_asset(db: Session, site_id: str, asset_id: str, user: User) -> ImageAsset:
    """Get an asset under a site the user owns, or raise 404/403."""
    check = check_ownership(db, asset_lookup(site_id, asset_id), user.id)
    return require_ownership(check, "Asset")


async def read_asset_source(request: Request) -> ImageAsset:
    """Build an unsaved asset from a multipart upload or a JSON reference body."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("multipart/form-data"):
        form = await request.form()
        upload = form.get("asset")
        if not isinstance(upload, UploadFile):
            raise ValidationFailed("No asset file provided", "NO_ASSET_FILE")
        try:
            filename = await save_image_upload(upload)
        except InvalidUploadError as e:
            raise ValidationFailed(str(e), e.error_code) from None
        alt_text = form.get("alt_text")
        return ImageAsset(
            url=storage_url(filename),
            storage_filename=filename,
            alt_text=alt_text if isinstance(alt_text, str) else None,
        )

    try:
        body = await request.json()
    except ValueError:
        raise ValidationFailed("Request body must be JSON or multipart", "INVALID_BODY") from None
    reference = AssetReferenceCreate.model_validate(body)
    return ImageAsset(url=reference.url, alt_text=reference.alt_text)


@router.post("", response_model=DataResponse[AssetResponse], status_code=status.HTTP_201_CREATED)
async def create_site_asset(
    site_id: str,
    request: Request,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add a site-level asset from an uploaded file ("asset") or a {url, alt_text} reference.

    Note: This endpoint must remain async because form and body reads are async.
    """
    get_owned_site(db, site_id, current_user)
    asset = await read_asset_source(request)
    asset.site_id = site_id

    try:
        db.add(asset)
        db.commit()
    except Exception:
        db.rollback()
        if asset.storage_filename:
            delete_stored_file(asset.storage_filename)
        raise

    db.refresh(asset)
    return DataResponse(data=AssetResponse.model_validate(asset))


@router.put("/{asset_id}", response_model=DataResponse[AssetResponse])
def update_site_asset(
    site_id: str,
    asset_id: str,
    payload: Annotated[dict[str, Any], Body()],
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update asset url and alt text."""
    asset = get_owned_asset(db, site_id, asset_id, current_user)
    apply_partial_update(db, ASSET_FIELDS, asset_id, payload)
    db.refresh(asset)
    return DataResponse(data=AssetResponse.model_validate(asset))


@router.delete("/{asset_id}", response_model=DataResponse[AssetResponse])
def delete_site_asset(
    site_id: str,
    asset_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete an asset and, if this service stored its file, the file too."""
    asset = get_owned_asset(db, site_id, asset_id, current_user)
    deleted = AssetResponse.model_validate(asset)
    storage_filename = asset.storage_filename

    db.delete(asset)
    db.commit()

    # File removal happens only after the row delete is committed
    if storage_filename:
        delete_stored_file(storage_filename)
    return DataResponse(data=deleted)
