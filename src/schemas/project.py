"""Portfolio project schemas."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.schemas.site import reject_null


class ProjectCreate(BaseModel):
    """Create a new project on a site."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    date: dt.date
    tags: list[str] = []
    demo_url: str | None = None
    code_url: str | None = None
    images: list[str] = []
    order_index: int | None = None  # Appended after the last project when omitted


class ProjectUpdate(BaseModel):
    """Partial update of a project."""

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    date: dt.date | None = None
    tags: list[str] | None = None
    demo_url: str | None = None
    code_url: str | None = None
    images: list[str] | None = None
    order_index: int | None = None

    @field_validator("title", "description", "date", "tags", "images", "order_index")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class ProjectResponse(BaseModel):
    """Project response."""

    model_config = ConfigDict(from_attributes=True)

    project_id: str
    site_id: str
    title: str
    description: str
    date: dt.date
    tags: list[str]
    demo_url: str | None
    code_url: str | None
    images: list[str]
    order_index: int
    created_at: dt.datetime
    updated_at: dt.datetime
