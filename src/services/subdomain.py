"""Subdomain derivation for portfolio sites."""

import itertools
import re
from collections.abc import Iterator

from sqlalchemy.orm import Session

from src.models.site import PortfolioSite

FALLBACK_SUBDOMAIN = "site"

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def base_subdomain(username: str) -> str:
    """Lower-case the username and strip everything but [a-z0-9]."""
    return _NON_ALPHANUMERIC.sub("", username.lower()) or FALLBACK_SUBDOMAIN


def subdomain_candidates(username: str) -> Iterator[str]:
    """Yield base, base1, base2, ..."""
    base = base_subdomain(username)
    yield base
    for n in itertools.count(1):
        yield f"{base}{n}"


def subdomain_exists(db: Session, subdomain: str) -> bool:
    """Check whether a site already uses this subdomain."""
    found = db.query(PortfolioSite.site_id).filter(PortfolioSite.subdomain == subdomain).first()
    return found is not None


def next_available_subdomain(db: Session, candidates: Iterator[str]) -> str:
    """Consume candidates until one is not in use.

    The check is not atomic; callers must still handle a unique-constraint
    violation on insert.
    """
    for candidate in candidates:
        if not subdomain_exists(db, candidate):
            return candidate
    raise ValueError("Subdomain candidates exhausted")
