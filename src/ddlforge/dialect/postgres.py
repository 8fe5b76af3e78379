"""PostgreSQL dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities, StartWithSupport
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import (
    DatabaseFunction,
    DefaultValue,
    GenerationType,
    SequenceNextValue,
)

# Identity columns arrived in 10; older servers only have SERIAL types.
_IDENTITY_SINCE = 10

_SERIAL_TYPES: dict[str, str] = {
    "INT": "SERIAL",
    "INTEGER": "SERIAL",
    "INT4": "SERIAL",
    "BIGINT": "BIGSERIAL",
    "INT8": "BIGSERIAL",
    "SMALLINT": "SMALLSERIAL",
    "INT2": "SMALLSERIAL",
    "TINYINT": "SMALLSERIAL",
}


@DialectRegistry.register
class PostgresDialect(Dialect):
    """PostgreSQL dialect — SERIAL types before 10, identity columns after."""

    aliases = ("postgres", "pg")
    default_major_version = 9

    _type_aliases = {
        "DATETIME": "TIMESTAMP",
        "TINYINT": "SMALLINT",
        "DOUBLE": "DOUBLE PRECISION",
        "CLOB": "TEXT",
        "BLOB": "BYTEA",
        "NVARCHAR": "VARCHAR",
        "NCHAR": "CHAR",
    }
    _self_incrementing_types = frozenset(
        {"SERIAL", "BIGSERIAL", "SMALLSERIAL", "SERIAL2", "SERIAL4", "SERIAL8"}
    )

    @property
    def name(self) -> str:
        return "postgresql"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_create_if_not_exists=True,
            supports_tablespaces=True,
            supports_index_tablespace=True,
            supports_initially_deferrable_columns=True,
            supports_catalogs=False,
            temp_tables_unqualified=True,
        )

    @property
    def current_datetime_function(self) -> str:
        return "NOW()"

    def _serial_type(self, base: str, major_version: int | None) -> str | None:
        if major_version is not None and major_version >= _IDENTITY_SINCE:
            return None
        return _SERIAL_TYPES.get(base)

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        if major_version is None or major_version < _IDENTITY_SINCE:
            return ""
        return super().auto_increment_clause(
            start_with, increment_by, generation_type, default_on_null, major_version
        )

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        if self_incrementing_type or major_version is None or major_version < _IDENTITY_SINCE:
            return StartWithSupport.AUXILIARY_SEQUENCE
        return StartWithSupport.INLINE

    def default_keyword(self, value: DefaultValue) -> str | None:
        if isinstance(value, DatabaseFunction) and value.value.startswith("GENERATED ALWAYS "):
            return None
        return "DEFAULT"

    def sequence_next_value_sql(self, sequence: SequenceNextValue) -> str:
        escaped = self.escape_sequence_name(None, sequence.schema_name, sequence.sequence_name)
        return f"nextval('{self.escape_string(escaped)}')"
