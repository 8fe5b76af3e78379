"""Secondary statements a dialect needs to fully realize a primary statement."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect
from ddlforge.models.sql import AffectedObject, ObjectKind, SqlFragment


class AuxiliaryStatementEmitter:
    """Records auxiliary fragments in the order the assembler asks for them.

    One emitter is created per generation call.
    """

    def __init__(self, dialect: Dialect) -> None:
        self._dialect = dialect
        self._fragments: list[SqlFragment] = []

    def sequence_start(
        self,
        catalog: str | None,
        schema: str | None,
        table: str,
        column: str,
        start_with: int,
    ) -> SqlFragment:
        """Move the start of the sequence backing ``table.column`` (``<table>_<column>_seq``)."""
        sequence_name = f"{table}_{column}_seq"
        escaped = self._dialect.escape_sequence_name(catalog, schema, sequence_name)
        fragment = SqlFragment(
            sql=self._dialect.alter_sequence_start_sql(escaped, start_with),
            affected=AffectedObject(
                kind=ObjectKind.SEQUENCE,
                name=sequence_name,
                schema_name=schema,
                catalog_name=catalog,
            ),
        )
        self._fragments.append(fragment)
        return fragment

    def fragments(self) -> list[SqlFragment]:
        return list(self._fragments)
