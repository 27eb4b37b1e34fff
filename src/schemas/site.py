"""Portfolio site schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUBDOMAIN_PATTERN = r"^[a-z0-9]+$"


def reject_null(value):
    """Reject an explicit null for a column that cannot be cleared."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class SiteCreate(BaseModel):
    """Create a new portfolio site."""

    site_title: str = Field(..., min_length=1)
    tagline: str | None = None
    hero_image_url: str | None = None
    about_text: str | None = None
    template_id: str | None = Field(None, max_length=100)
    primary_color: str | None = Field(None, max_length=50)
    font_family: str | None = Field(None, max_length=100)
    is_dark_mode: bool = False
    seo_title: str | None = None
    seo_description: str | None = None


class SiteUpdate(BaseModel):
    """Partial update of site settings."""

    site_title: str | None = Field(None, min_length=1)
    tagline: str | None = None
    hero_image_url: str | None = None
    about_text: str | None = None
    template_id: str | None = Field(None, max_length=100)
    primary_color: str | None = Field(None, max_length=50)
    font_family: str | None = Field(None, max_length=100)
    is_dark_mode: bool | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    subdomain: str | None = Field(None, max_length=100, pattern=SUBDOMAIN_PATTERN)

    @field_validator("site_title", "is_dark_mode")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class HeroUpdate(BaseModel):
    """Hero section editor payload."""

    title: str | None = Field(None, min_length=1)
    tagline: str | None = None
    hero_image_url: str | None = None

    @field_validator("title")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class AboutUpdate(BaseModel):
    """About section editor payload. avatar_url updates the owner's profile."""

    bio: str | None = None
    avatar_url: str | None = None


class SeoUpdate(BaseModel):
    """SEO editor payload."""

    seo_title: str | None = None
    seo_description: str | None = None


class ThemeUpdate(BaseModel):
    """Theme editor payload."""

    template_id: str | None = Field(None, max_length=100)
    primary_color: str | None = Field(None, max_length=50)
    font_family: str | None = Field(None, max_length=100)
    is_dark_mode: bool | None = None

    @field_validator("is_dark_mode")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class SiteResponse(BaseModel):
    """Portfolio site response."""

    model_config = ConfigDict(from_attributes=True)

    site_id: str
    user_id: str
    site_title: str
    tagline: str | None
    hero_image_url: str | None
    about_text: str | None
    template_id: str | None
    primary_color: str | None
    font_family: str | None
    is_dark_mode: bool
    seo_title: str | None
    seo_description: str | None
    subdomain: str | None
    published_at: datetime | None
    export_zip_url: str | None
    created_at: datetime
    updated_at: datetime
