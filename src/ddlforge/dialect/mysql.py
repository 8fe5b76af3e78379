"""MySQL and MariaDB dialect implementations."""

from __future__ import annotations

from ddlforge.dialect.base import (
    Dialect,
    DialectCapabilities,
    NativeType,
    StartWithSupport,
)
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import GenerationType


@DialectRegistry.register
class MySQLDialect(Dialect):
    """MySQL dialect — backtick quoting, inline COMMENT, AUTO_INCREMENT table option.

    MySQL has databases rather than schemas: whichever of catalog or schema
    is given qualifies the table.
    """

    _quote_start = "`"
    _quote_end = "`"
    _identifier_chars = "_$"
    _type_aliases = {
        "BOOLEAN": "BIT(1)",
        "BOOL": "BIT(1)",
        "CLOB": "LONGTEXT",
        "BLOB": "LONGBLOB",
        "UUID": "CHAR(36)",
        "NUMBER": "DECIMAL",
        "NVARCHAR": "VARCHAR",
    }

    @property
    def name(self) -> str:
        return "mysql"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_create_if_not_exists=True,
            supports_primary_key_names=False,
            supports_auto_increment_by=False,
            supports_schemas=False,
            supports_catalogs=True,
            supports_inline_column_comments=True,
            supports_table_comment_option=True,
            auto_increment_columns_first_in_primary_key=True,
        )

    @property
    def current_datetime_function(self) -> str:
        return "NOW()"

    def _qualifiers(self, catalog: str | None, schema: str | None) -> list[str]:
        database = catalog or schema
        return [database] if database else []

    def escape_string(self, value: str) -> str:
        return value.replace("\\", "\\\\").replace("'", "''")

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        return "AUTO_INCREMENT"

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        return StartWithSupport.TABLE_OPTION

    def table_option_auto_increment_start(self, start_with: int) -> str | None:
        return f"AUTO_INCREMENT={start_with}"

    def requires_explicit_null(self, native_type: NativeType) -> bool:
        return True


@DialectRegistry.register
class MariaDBDialect(MySQLDialect):
    """MariaDB — MySQL syntax plus sequences."""

    @property
    def name(self) -> str:
        return "mariadb"
