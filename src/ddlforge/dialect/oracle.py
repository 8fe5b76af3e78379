"""Oracle dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import (
    DatabaseFunction,
    DefaultValue,
    GenerationType,
    SequenceNextValue,
)


@DialectRegistry.register
class OracleDialect(Dialect):
    """Oracle dialect — ENABLE NOVALIDATE, ROWDEPENDENCIES, upper-case constraint names."""

    _identifier_chars = "_$#"
    _type_aliases = {
        "INT": "INTEGER",
        "BIGINT": "NUMBER(38, 0)",
        "VARCHAR": "VARCHAR2",
        "NVARCHAR": "NVARCHAR2",
        "BOOLEAN": "NUMBER(1)",
        "BOOL": "NUMBER(1)",
        "DATETIME": "TIMESTAMP",
        "TEXT": "CLOB",
        "DOUBLE": "FLOAT(24)",
        "TINYINT": "NUMBER(3)",
        "UUID": "RAW(16)",
    }

    @property
    def name(self) -> str:
        return "oracle"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_not_null_constraint_names=True,
            supports_tablespaces=True,
            supports_index_tablespace=True,
            supports_initially_deferrable_columns=True,
            supports_row_dependencies=True,
        )

    @property
    def current_datetime_function(self) -> str:
        return "SYSTIMESTAMP"

    def normalize_constraint_name(self, name: str) -> str:
        return name.upper()

    def _identity_keyword(
        self, generation_type: GenerationType | None, default_on_null: bool
    ) -> str:
        if generation_type == GenerationType.ALWAYS:
            return "GENERATED ALWAYS AS IDENTITY"
        if default_on_null:
            return "GENERATED BY DEFAULT ON NULL AS IDENTITY"
        return "GENERATED BY DEFAULT AS IDENTITY"

    def novalidate_clause(self) -> str | None:
        return "ENABLE NOVALIDATE"

    def default_keyword(self, value: DefaultValue) -> str | None:
        if isinstance(value, DatabaseFunction) and value.value.startswith("GENERATED ALWAYS "):
            return None
        return "DEFAULT"

    def boolean_literal(self, value: bool) -> str:
        return "1" if value else "0"

    def sequence_next_value_sql(self, sequence: SequenceNextValue) -> str:
        escaped = self.escape_sequence_name(None, sequence.schema_name, sequence.sequence_name)
        return f"{escaped}.nextval"
