"""Tests for the allow-listed partial update builder."""

import pytest
from pydantic import ValidationError

from src.api.assets import ASSET_FIELDS
from src.api.sites import HERO_FIELDS, SITE_PROTECTED_KEYS, SITE_SETTINGS_FIELDS
from src.models.site import PortfolioSite
from src.schemas.site import SeoUpdate
from src.services.partial_update import (
    EmptyUpdateError,
    UnknownFieldsError,
    UpdatableFields,
    build_update,
    collect_changes,
)


def compile_update(fields, key_value, payload):
    changes = collect_changes(fields, payload)
    return build_update(fields, key_value, changes.assignments).compile()


class TestCollectChanges:
    """Tests for payload validation against an allow-list."""

    def test_absent_keys_are_skipped(self):
        changes = collect_changes(SITE_SETTINGS_FIELDS, {"tagline": "New"})
        assert changes.assignments == [("tagline", "New")]

    def test_explicit_null_is_kept(self):
        changes = collect_changes(SITE_SETTINGS_FIELDS, {"tagline": None})
        assert changes.assignments == [("tagline", None)]

    def test_payload_order_is_preserved(self):
        changes = collect_changes(
            SITE_SETTINGS_FIELDS,
            {"seo_title": "S", "site_title": "T", "primary_color": "#000"},
        )
        assert [column for column, _ in changes.assignments] == [
            "seo_title",
            "site_title",
            "primary_color",
        ]

    def test_payload_names_map_to_columns(self):
        changes = collect_changes(HERO_FIELDS, {"tagline": "Hi", "title": "Welcome"})
        assert changes.assignments == [("tagline", "Hi"), ("site_title", "Welcome")]

    def test_protected_keys_are_dropped(self):
        payload = {key: "x" for key in SITE_PROTECTED_KEYS}
        payload["tagline"] = "kept"
        changes = collect_changes(SITE_SETTINGS_FIELDS, payload)
        assert changes.assignments == [("tagline", "kept")]

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(UnknownFieldsError) as exc_info:
            collect_changes(SITE_SETTINGS_FIELDS, {"tagline": "x", "owner": "y", "admin": True})
        assert exc_info.value.fields == ["owner", "admin"]

    def test_null_for_required_column_is_rejected(self):
        with pytest.raises(ValidationError):
            collect_changes(SITE_SETTINGS_FIELDS, {"site_title": None})

    def test_invalid_value_is_rejected(self):
        with pytest.raises(ValidationError):
            collect_changes(SITE_SETTINGS_FIELDS, {"is_dark_mode": "sometimes"})


class TestBuildUpdate:
    """Tests for the generated UPDATE statement."""

    def test_set_clause_follows_payload_order(self):
        sql = str(compile_update(SITE_SETTINGS_FIELDS, "s1", {"tagline": "a", "seo_title": "b"}))
        assert sql.index("tagline=") < sql.index("seo_title=") < sql.index("updated_at=")

    def test_values_are_bound_parameters(self):
        hostile = "x'; DROP TABLE users; --"
        compiled = compile_update(SITE_SETTINGS_FIELDS, "s1", {"tagline": hostile})
        assert hostile not in str(compiled)
        assert hostile in compiled.params.values()
        assert "s1" in compiled.params.values()

    def test_updated_at_is_appended(self):
        sql = str(compile_update(SITE_SETTINGS_FIELDS, "s1", {"tagline": "a"}))
        assert "updated_at=now()" in sql

    def test_no_updated_at_for_assets(self):
        sql = str(compile_update(ASSET_FIELDS, "a1", {"alt_text": "Sunset"}))
        assert "alt_text=" in sql
        assert "updated_at" not in sql

    def test_where_clause_targets_key(self):
        sql = str(compile_update(HERO_FIELDS, "s1", {"title": "T"}))
        assert "WHERE portfolio_sites.site_id =" in sql

    def test_empty_assignments_raise(self):
        with pytest.raises(EmptyUpdateError):
            build_update(SITE_SETTINGS_FIELDS, "s1", [])

    def test_only_protected_keys_leave_nothing_to_update(self):
        changes = collect_changes(SITE_SETTINGS_FIELDS, {"site_id": "x", "updated_at": "y"})
        with pytest.raises(EmptyUpdateError):
            build_update(SITE_SETTINGS_FIELDS, "s1", changes.assignments)


class TestUpdatableFields:
    """Tests for allow-list construction."""

    def test_protected_column_cannot_be_updatable(self):
        with pytest.raises(ValueError, match="Protected"):
            UpdatableFields(
                table=PortfolioSite.__table__,
                key="site_id",
                schema=SeoUpdate,
                columns={"seo_title": "user_id"},
                protected=frozenset({"user_id"}),
            )

    def test_unknown_column_is_rejected(self):
        with pytest.raises(ValueError, match="no column"):
            UpdatableFields(
                table=PortfolioSite.__table__,
                key="site_id",
                schema=SeoUpdate,
                columns={"seo_title": "meta_title"},
            )
