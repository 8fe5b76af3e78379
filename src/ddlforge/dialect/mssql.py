"""Microsoft SQL Server dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities, NativeType, TablespaceKeyword
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import GenerationType


@DialectRegistry.register
class MSSQLDialect(Dialect):
    """SQL Server dialect — bracket quoting, IDENTITY(seed, step), named DEFAULT constraints."""

    aliases = ("sqlserver", "tsql")

    _quote_start = "["
    _quote_end = "]"
    _type_aliases = {
        "BOOLEAN": "BIT",
        "BOOL": "BIT",
        "CLOB": "VARCHAR(MAX)",
        "TEXT": "VARCHAR(MAX)",
        "BLOB": "VARBINARY(MAX)",
        "UUID": "UNIQUEIDENTIFIER",
        "DOUBLE": "FLOAT",
        "NUMBER": "NUMERIC",
    }

    @property
    def name(self) -> str:
        return "mssql"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_tablespaces=True,
            supports_catalogs=True,
            requires_named_default_constraint=True,
            tablespace_keyword=TablespaceKeyword.ON,
        )

    @property
    def current_datetime_function(self) -> str:
        return "GETDATE()"

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        if start_with is None and increment_by is None:
            return "IDENTITY"
        seed = start_with if start_with is not None else 1
        step = increment_by if increment_by is not None else 1
        return f"IDENTITY ({seed}, {step})"

    def boolean_literal(self, value: bool) -> str:
        return "1" if value else "0"

    def requires_explicit_null(self, native_type: NativeType) -> bool:
        # TIMESTAMP is rowversion here and defaults to NOT NULL.
        return "timestamp" in native_type.sql.lower()
