"""Informix dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import (
    ConstraintNamePosition,
    Dialect,
    DialectCapabilities,
    StartWithSupport,
    TablespaceKeyword,
)
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import GenerationType

_SERIAL_TYPES: dict[str, str] = {
    "INT": "SERIAL",
    "INTEGER": "SERIAL",
    "SMALLINT": "SERIAL",
    "TINYINT": "SERIAL",
    "BIGINT": "SERIAL8",
    "INT8": "SERIAL8",
}


@DialectRegistry.register
class InformixDialect(Dialect):
    """Informix — SERIAL types, constraint names trail the constraint, ``IN <dbspace>``."""

    _type_aliases = {
        "DATETIME": "DATETIME YEAR TO FRACTION(5)",
        "TIMESTAMP": "DATETIME YEAR TO FRACTION(5)",
        "CLOB": "TEXT",
        "BLOB": "BYTE",
        "DOUBLE": "FLOAT",
        "BOOL": "BOOLEAN",
    }
    _self_incrementing_types = frozenset({"SERIAL", "SERIAL8", "BIGSERIAL"})

    @property
    def name(self) -> str:
        return "informix"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_create_if_not_exists=True,
            supports_tablespaces=True,
            tablespace_keyword=TablespaceKeyword.IN,
            foreign_key_name_position=ConstraintNamePosition.AFTER,
        )

    @property
    def current_datetime_function(self) -> str:
        return "CURRENT YEAR TO FRACTION(5)"

    def _serial_type(self, base: str, major_version: int | None) -> str | None:
        return _SERIAL_TYPES.get(base)

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        return ""

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        return StartWithSupport.UNSUPPORTED

    def boolean_literal(self, value: bool) -> str:
        return "'t'" if value else "'f'"
