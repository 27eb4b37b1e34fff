"""Contact submission model."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from src.database import Base
from src.models.mixins import generate_id


class ContactSubmission(Base):
    """A message left by a visitor through a site's contact form."""

    __tablename__ = "contact_submissions"

    submission_id = Column(String(36), primary_key=True, default=generate_id)
    site_id = Column(
        String(36),
        ForeignKey("portfolio_sites.site_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
