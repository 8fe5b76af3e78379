"""Generated SQL fragments and the schema objects they affect."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ObjectKind(StrEnum):
    TABLE = "table"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class AffectedObject:
    """Schema object touched by a fragment, for dependency tracking downstream."""

    kind: ObjectKind
    name: str
    schema_name: str | None = None
    catalog_name: str | None = None


@dataclass(frozen=True)
class SqlFragment:
    """One executable SQL statement without its terminating delimiter."""

    sql: str
    affected: AffectedObject | None = None

    def __str__(self) -> str:
        return self.sql
