"""Databricks (Delta Lake) dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import DatabaseFunction, DefaultValue


@DialectRegistry.register
class DatabricksDialect(Dialect):
    """Databricks dialect — backtick quoting, catalog.schema.table, identity columns."""

    _quote_start = "`"
    _quote_end = "`"
    _type_aliases = {
        "TEXT": "STRING",
        "CLOB": "STRING",
        "NVARCHAR": "STRING",
        "UUID": "STRING",
        "DATETIME": "TIMESTAMP",
        "BLOB": "BINARY",
        "NUMBER": "DECIMAL",
    }

    @property
    def name(self) -> str:
        return "databricks"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_create_if_not_exists=True,
            supports_primary_key_names=True,
            supports_catalogs=True,
        )

    @property
    def current_datetime_function(self) -> str:
        return "CURRENT_TIMESTAMP()"

    def default_keyword(self, value: DefaultValue) -> str | None:
        if isinstance(value, DatabaseFunction) and value.value.startswith("GENERATED ALWAYS "):
            return None
        return "DEFAULT"
