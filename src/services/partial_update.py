"""Partial UPDATE statements built from request payloads.

Each kind of update declares an allow-list (``UpdatableFields``) mapping the
payload field names it accepts to table columns. A payload is validated against
that allow-list and turned into a single parameterized UPDATE whose SET clause
follows the payload's key order and always ends with ``updated_at = now()``.

Absent keys are skipped; an explicit ``None`` is kept and clears the column.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Table, func, update
from sqlalchemy.sql.dml import Update


class UnknownFieldsError(ValueError):
    """The payload contains keys that are neither updatable nor protected."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Unknown fields: {', '.join(fields)}")


class EmptyUpdateError(ValueError):
    """The payload contains nothing to update."""

    def __init__(self):
        super().__init__("No valid fields to update")


@dataclass(frozen=True)
class UpdatableFields:
    """Allow-list for one kind of partial update.

    Attributes:
        table: Table the UPDATE targets.
        key: Primary key column used in the WHERE clause.
        schema: Pydantic model validating the values of present keys.
        columns: Payload field name -> column name for fields that land in SET.
            Schema fields missing here are validated but never written.
        protected: Keys silently dropped from any payload (ids, owner keys,
            server-managed columns).
    """

    table: Table
    key: str
    schema: type[BaseModel]
    columns: Mapping[str, str]
    protected: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        missing = [c for c in self.columns.values() if c not in self.table.c]
        if missing:
            raise ValueError(f"{self.table.name} has no column(s): {', '.join(missing)}")
        exposed = (set(self.columns) | set(self.columns.values())) & self.protected
        if exposed or self.key in self.columns.values():
            raise ValueError(f"Protected columns cannot be updatable: {sorted(exposed)}")


@dataclass
class PartialChanges:
    """Validated contents of a partial-update payload."""

    assignments: list[tuple[str, Any]]  # (column, value) in payload order
    values: dict[str, Any]  # every present schema field, by payload name


def collect_changes(fields: UpdatableFields, payload: Mapping[str, Any]) -> PartialChanges:
    """Validate a payload against an allow-list.

    Raises:
        UnknownFieldsError: if a key is neither allowed nor protected.
        pydantic.ValidationError: if a present value fails the schema.
    """
    candidate = {k: v for k, v in payload.items() if k not in fields.protected}

    unknown = [k for k in candidate if k not in fields.schema.model_fields]
    if unknown:
        raise UnknownFieldsError(unknown)

    validated = fields.schema.model_validate(candidate)
    values = validated.model_dump(exclude_unset=True)

    assignments = [(fields.columns[k], values[k]) for k in candidate if k in fields.columns]
    return PartialChanges(assignments=assignments, values={k: values[k] for k in candidate})


def build_update(
    fields: UpdatableFields, key_value: Any, assignments: list[tuple[str, Any]]
) -> Update:
    """Build the UPDATE statement for a set of assignments.

    Every value is a bound parameter. ``updated_at = now()`` is appended when
    the table has that column.

    Raises:
        EmptyUpdateError: if there are no assignments.
    """
    if not assignments:
        raise EmptyUpdateError()

    table = fields.table
    ordered = [(table.c[column], value) for column, value in assignments]
    if "updated_at" in table.c:
        ordered.append((table.c.updated_at, func.now()))

    return update(table).where(table.c[fields.key] == key_value).ordered_values(*ordered)
