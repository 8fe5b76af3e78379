"""SQLite dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import (
    INTEGER_TYPES,
    Dialect,
    DialectCapabilities,
    NativeType,
    StartWithSupport,
    split_type,
)
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import GenerationType


@DialectRegistry.register
class SQLiteDialect(Dialect):
    """SQLite dialect — rowid tables need ``INTEGER PRIMARY KEY AUTOINCREMENT`` inline."""

    @property
    def name(self) -> str:
        return "sqlite"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_create_if_not_exists=True,
            supports_schemas=False,
            inline_auto_increment_primary_key=True,
        )

    @property
    def current_datetime_function(self) -> str:
        return "CURRENT_TIMESTAMP"

    def native_type(
        self,
        type_text: str,
        auto_increment: bool = False,
        major_version: int | None = None,
    ) -> NativeType:
        # AUTOINCREMENT is only accepted on a column spelled exactly INTEGER.
        if auto_increment and split_type(type_text)[0].upper() in INTEGER_TYPES:
            return NativeType(sql="INTEGER")
        return super().native_type(type_text, auto_increment, major_version)

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        return "AUTOINCREMENT"

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        return StartWithSupport.UNSUPPORTED

    def boolean_literal(self, value: bool) -> str:
        return "1" if value else "0"
