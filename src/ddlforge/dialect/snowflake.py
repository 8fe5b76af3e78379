"""Snowflake dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import GenerationType


@DialectRegistry.register
class SnowflakeDialect(Dialect):
    """Snowflake dialect — AUTOINCREMENT (start, step), three-part names."""

    _type_aliases = {
        "DATETIME": "TIMESTAMP_NTZ",
        "TEXT": "VARCHAR",
        "CLOB": "VARCHAR",
        "NVARCHAR": "VARCHAR",
        "BLOB": "BINARY",
        "UUID": "VARCHAR(36)",
    }

    @property
    def name(self) -> str:
        return "snowflake"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_create_if_not_exists=True,
            supports_catalogs=True,
        )

    @property
    def current_datetime_function(self) -> str:
        return "CURRENT_TIMESTAMP()"

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        if start_with is None and increment_by is None:
            return "AUTOINCREMENT"
        start = start_with if start_with is not None else 1
        step = increment_by if increment_by is not None else 1
        return f"AUTOINCREMENT ({start}, {step})"
