"""Image asset model."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from src.database import Base
from src.models.mixins import generate_id


class ImageAsset(Base):
    """An uploaded or referenced image belonging to a site, optionally to a project."""

    __tablename__ = "image_assets"

    image_id = Column(String(36), primary_key=True, default=generate_id)
    site_id = Column(
        String(36),
        ForeignKey("portfolio_sites.site_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    project_id = Column(
        String(36),
        ForeignKey("portfolio_projects.project_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    url = Column(Text, nullable=False)  # "/storage/<file>" for uploads
    # Set only for files saved by this service; deletes never follow url
    storage_filename = Column(String(255), nullable=True)
    alt_text = Column(Text, nullable=True)
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
