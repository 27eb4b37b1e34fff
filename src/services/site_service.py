"""Portfolio site service: creation, publishing and export."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.site import PortfolioSite
from src.schemas.site import SiteCreate
from src.services.export import write_site_export
from src.services.subdomain import next_available_subdomain, subdomain_candidates

logger = logging.getLogger(__name__)

MAX_SUBDOMAIN_ATTEMPTS = 100


class SubdomainUnavailableError(RuntimeError):
    """No subdomain could be reserved within the attempt limit."""


class SiteService:
    """Service for site operations that span more than one statement."""

    def __init__(self, db: Session):
        self.db = db

    def create_site(self, user_id: str, username: str, data: SiteCreate) -> PortfolioSite:
        """Create a site with a subdomain derived from the owner's username.

        The pre-insert availability check can race with another registration, so a unique
        violation on insert rolls back and retries with the next suffix.
        """
        candidates = subdomain_candidates(username)
        last_error: IntegrityError | None = None

        for _ in range(MAX_SUBDOMAIN_ATTEMPTS):
            subdomain = next_available_subdomain(self.db, candidates)
            site = PortfolioSite(user_id=user_id, subdomain=subdomain, **data.model_dump())
            self.db.add(site)
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                last_error = e
                logger.warning(f"Subdomain '{subdomain}' taken during insert, trying next suffix")
                continue

            self.db.refresh(site)
            logger.info(f"Created site {site.site_id} for user {user_id} at '{subdomain}'")
            return site

        raise SubdomainUnavailableError(
            f"Could not reserve a subdomain for '{username}'"
        ) from last_error

    def publish_site(self, site: PortfolioSite) -> PortfolioSite:
        """Mark the site as published now. The subdomain is left untouched."""
        site.published_at = datetime.now(UTC)
        self.db.commit()
        self.db.refresh(site)
        return site

    def export_site(self, site: PortfolioSite) -> str:
        """Generate the export archive and record its URL on the site."""
        export_zip_url = write_site_export(site.site_id)
        site.export_zip_url = export_zip_url
        self.db.commit()
        return export_zip_url
