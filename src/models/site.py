"""Portfolio site model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, generate_id


class PortfolioSite(Base, TimestampMixin):
    """A user's portfolio site and its presentation settings."""

    __tablename__ = "portfolio_sites"

    site_id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    site_title = Column(Text, nullable=False)
    tagline = Column(Text, nullable=True)
    hero_image_url = Column(Text, nullable=True)
    about_text = Column(Text, nullable=True)

    # Theme
    template_id = Column(String(100), nullable=True)
    primary_color = Column(String(50), nullable=True)  # Hex color like "#FF5733"
    font_family = Column(String(100), nullable=True)
    is_dark_mode = Column(Boolean, nullable=False, default=False)

    # SEO
    seo_title = Column(Text, nullable=True)
    seo_description = Column(Text, nullable=True)

    # Publishing
    subdomain = Column(String(100), unique=True, nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=True)
    export_zip_url = Column(Text, nullable=True)

    # Relationships
    owner = relationship("User", backref="sites")
    projects = relationship("Project", back_populates="site", passive_deletes=True)
