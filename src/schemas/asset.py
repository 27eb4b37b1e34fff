"""Image asset schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.schemas.site import reject_null


class AssetReferenceCreate(BaseModel):
    """Register an already-hosted image as a site asset."""

    url: str = Field(..., min_length=1)
    alt_text: str | None = None


class AssetUpdate(BaseModel):
    """Partial update of asset metadata."""

    url: str | None = Field(None, min_length=1)
    alt_text: str | None = None

    @field_validator("url")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class AssetResponse(BaseModel):
    """Image asset response."""

    model_config = ConfigDict(from_attributes=True)

    image_id: str
    site_id: str | None
    project_id: str | None
    url: str
    alt_text: str | None
    uploaded_at: datetime
