"""Running allow-listed partial updates from request handlers."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from src.api.errors import ValidationFailed
from src.services.partial_update import (
    EmptyUpdateError,
    PartialChanges,
    UnknownFieldsError,
    UpdatableFields,
    build_update,
    collect_changes,
)


def parse_changes(fields: UpdatableFields, payload: Mapping[str, Any]) -> PartialChanges:
    """Validate a payload, mapping unknown keys to a 400."""
    try:
        return collect_changes(fields, payload)
    except UnknownFieldsError as e:
        raise ValidationFailed(str(e), "UNKNOWN_FIELDS", details={"fields": e.fields}) from None


def execute_update(db: Session, fields: UpdatableFields, key_value: Any, changes: PartialChanges):
    """Issue the UPDATE for validated changes without committing."""
    try:
        statement = build_update(fields, key_value, changes.assignments)
    except EmptyUpdateError as e:
        raise ValidationFailed(str(e), "NO_UPDATE_FIELDS") from None
    db.execute(statement)


def apply_partial_update(
    db: Session, fields: UpdatableFields, key_value: Any, payload: Mapping[str, Any]
) -> PartialChanges:
    """Validate, update and commit in one go."""
    changes = parse_changes(fields, payload)
    execute_update(db, fields, key_value, changes)
    db.commit()
    return changes
