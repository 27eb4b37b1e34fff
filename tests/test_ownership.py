"""Tests for ownership resolution."""

from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.models.asset import ImageAsset
from src.models.project import Project
from src.models.site import PortfolioSite
from src.models.user import User
from src.services.ownership import (
    Ownership,
    asset_lookup,
    check_ownership,
    project_lookup,
    site_lookup,
)


@pytest.fixture
def sites(db):
    """Two users, each with one site; alice's site has a project and an asset."""
    alice = User(username="alice", email="alice@example.com", password_hash="x")
    bob = User(username="bob", email="bob@example.com", password_hash="x")
    db.add_all([alice, bob])
    db.flush()

    alice_site = PortfolioSite(user_id=alice.id, site_title="A", subdomain="alice")
    bob_site = PortfolioSite(user_id=bob.id, site_title="B", subdomain="bob")
    db.add_all([alice_site, bob_site])
    db.flush()

    project = Project(
        site_id=alice_site.site_id,
        title="P",
        description="D",
        date=date(2024, 1, 1),
    )
    asset = ImageAsset(site_id=alice_site.site_id, url="https://cdn.example.com/a.jpg")
    db.add_all([project, asset])
    db.commit()

    return {
        "alice": alice,
        "bob": bob,
        "alice_site": alice_site,
        "bob_site": bob_site,
        "project": project,
        "asset": asset,
    }


def test_owner_is_allowed(db, sites):
    check = check_ownership(db, site_lookup(sites["alice_site"].site_id), sites["alice"].id)
    assert check.decision == Ownership.ALLOWED
    assert check.allowed
    assert check.resource.site_id == sites["alice_site"].site_id


def test_other_user_is_denied(db, sites):
    check = check_ownership(db, site_lookup(sites["alice_site"].site_id), sites["bob"].id)
    assert check.decision == Ownership.DENIED
    assert not check.allowed


def test_missing_site_is_not_found(db, sites):
    check = check_ownership(db, site_lookup("missing"), sites["alice"].id)
    assert check.decision == Ownership.NOT_FOUND
    assert check.resource is None


def test_project_owner_through_site(db, sites):
    lookup = project_lookup(sites["alice_site"].site_id, sites["project"].project_id)
    assert check_ownership(db, lookup, sites["alice"].id).allowed
    assert check_ownership(db, lookup, sites["bob"].id).decision == Ownership.DENIED


def test_project_under_wrong_site_is_not_found(db, sites):
    lookup = project_lookup(sites["bob_site"].site_id, sites["project"].project_id)
    assert check_ownership(db, lookup, sites["bob"].id).decision == Ownership.NOT_FOUND


def test_asset_owner_through_site(db, sites):
    lookup = asset_lookup(sites["alice_site"].site_id, sites["asset"].image_id)
    assert check_ownership(db, lookup, sites["alice"].id).allowed
    assert check_ownership(db, lookup, sites["bob"].id).decision == Ownership.DENIED


def test_lookup_runs_a_single_query():
    db = MagicMock()
    db.execute.return_value.first.return_value = None

    check_ownership(db, site_lookup("s1"), "u1")

    db.execute.assert_called_once()


def test_database_error_propagates():
    """A failing lookup is an infrastructure error, never a denial."""
    db = MagicMock()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))

    with pytest.raises(OperationalError):
        check_ownership(db, site_lookup("s1"), "u1")
