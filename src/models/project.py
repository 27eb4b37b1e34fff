"""Portfolio project model."""

from sqlalchemy import JSON, Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, generate_id


class Project(Base, TimestampMixin):
    """A project shown on a portfolio site."""

    __tablename__ = "portfolio_projects"

    project_id = Column(String(36), primary_key=True, default=generate_id)
    site_id = Column(
        String(36),
        ForeignKey("portfolio_sites.site_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    tags = Column(JSON, nullable=False, default=list)  # ["python", "web"]
    demo_url = Column(Text, nullable=True)
    code_url = Column(Text, nullable=True)
    images = Column(JSON, nullable=False, default=list)  # Ordered list of image URLs
    order_index = Column(Integer, nullable=False, default=0)

    # Relationships
    site = relationship("PortfolioSite", back_populates="projects")
