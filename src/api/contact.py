"""Contact form API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.errors import NotFound
from src.database import get_db
from src.models.contact import ContactSubmission
from src.models.site import PortfolioSite
from src.schemas.contact import ContactSubmissionCreate, ContactSubmissionResponse
from src.schemas.envelope import DataResponse

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post(
    "/submit",
    response_model=DataResponse[ContactSubmissionResponse],
    status_code=status.HTTP_201_CREATED,
)
def submit_contact(
    submission_data: ContactSubmissionCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Submit a visitor message. No authentication required."""
    site_id = submission_data.site_id or None
    if site_id is not None:
        site = db.query(PortfolioSite.site_id).filter(PortfolioSite.site_id == site_id).first()
        if not site:
            raise NotFound("Site not found", "SITE_NOT_FOUND")

    submission = ContactSubmission(
        site_id=site_id,
        name=submission_data.name or None,
        email=submission_data.email,
        message=submission_data.message,
    )
    db.add(submission)
    db.commit()
    db.refresh(submission)

    return DataResponse(data=ContactSubmissionResponse.model_validate(submission))
