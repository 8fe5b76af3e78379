"""Sybase ASE and SQL Anywhere dialect implementations."""

from __future__ import annotations

from ddlforge.dialect.base import (
    Dialect,
    DialectCapabilities,
    NativeType,
    StartWithSupport,
    TablespaceKeyword,
)
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import DatabaseFunction, DefaultValue, GenerationType


@DialectRegistry.register
class SybaseDialect(Dialect):
    """Sybase Adaptive Server Enterprise — columns are NOT NULL unless told otherwise."""

    _quote_start = "["
    _quote_end = "]"
    _type_aliases = {
        "BOOLEAN": "BIT",
        "BOOL": "BIT",
        "CLOB": "TEXT",
        "BLOB": "IMAGE",
        "DOUBLE": "FLOAT",
    }

    @property
    def name(self) -> str:
        return "sybase"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(supports_catalogs=True)

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
        return "IDENTITY"

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        return StartWithSupport.UNSUPPORTED

    def boolean_literal(self, value: bool) -> str:
        return "1" if value else "0"

    def requires_explicit_null(self, native_type: NativeType) -> bool:
        return True


@DialectRegistry.register
class SybaseASADialect(Dialect):
    """SQL Anywhere — DEFAULT AUTOINCREMENT, ``CHECK ON COMMIT`` deferral, ``ON <dbspace>``."""

    aliases = ("sqlanywhere",)

    _type_aliases = {
        "BOOLEAN": "BIT",
        "BOOL": "BIT",
        "CLOB": "LONG VARCHAR",
        "TEXT": "LONG VARCHAR",
        "BLOB": "LONG BINARY",
    }

    @property
    def name(self) -> str:
        return "asany"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_tablespaces=True,
            tablespace_keyword=TablespaceKeyword.ON,
        )

    @property
    def current_datetime_function(self) -> str:
        return "CURRENT TIMESTAMP"

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        return "DEFAULT AUTOINCREMENT"

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        return StartWithSupport.UNSUPPORTED

    def initially_deferred_clause(self) -> str | None:
        return "CHECK ON COMMIT"

    def deferrable_clause(self) -> str | None:
        return None

    def default_keyword(self, value: DefaultValue) -> str | None:
        if isinstance(value, DatabaseFunction) and value.value.startswith("COMPUTE"):
            return None
        return "DEFAULT"

    def boolean_literal(self, value: bool) -> str:
        return "1" if value else "0"

    def requires_explicit_null(self, native_type: NativeType) -> bool:
        return True
