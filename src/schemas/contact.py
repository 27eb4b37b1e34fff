"""Contact submission schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactSubmissionCreate(BaseModel):
    """Visitor contact form submission."""

    name: str | None = Field(None, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    message: str = Field(..., min_length=1, max_length=10000)
    site_id: str | None = None


class ContactSubmissionResponse(BaseModel):
    """Contact submission response."""

    model_config = ConfigDict(from_attributes=True)

    submission_id: str
    site_id: str | None
    name: str | None
    email: str
    message: str
    created_at: datetime
