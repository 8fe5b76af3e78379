"""IBM Db2 dialect implementations (LUW and z/OS)."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities, TablespaceKeyword
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import DatabaseFunction, DefaultValue


@DialectRegistry.register
class Db2Dialect(Dialect):
    """Db2 for Linux/Unix/Windows — ``IN <tablespace>``, upper-case constraint names."""

    _identifier_chars = "_$#@"
    _type_aliases = {
        "BOOL": "BOOLEAN",
        "TINYINT": "SMALLINT",
        "DATETIME": "TIMESTAMP",
        "TEXT": "CLOB",
        "NVARCHAR": "VARGRAPHIC",
        "NUMBER": "DECIMAL",
        "UUID": "CHAR(36)",
    }

    @property
    def name(self) -> str:
        return "db2"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(
            supports_tablespaces=True,
            tablespace_keyword=TablespaceKeyword.IN,
        )

    @property
    def current_datetime_function(self) -> str:
        return "CURRENT TIMESTAMP"

    def normalize_constraint_name(self, name: str) -> str:
        return name.upper()


@DialectRegistry.register
class Db2zDialect(Db2Dialect):
    """Db2 for z/OS — special-register defaults spelled without the DEFAULT value form."""

    _special_registers: dict[str, str] = {
        "CURRENT USER": "SESSION_USER",
        "CURRENT SQLID": "CURRENT SQLID",
    }

    @property
    def name(self) -> str:
        return "db2z"

    def default_keyword(self, value: DefaultValue) -> str | None:
        if "IDENTITY GENERATED BY DEFAULT" in str(value):
            return None
        return "DEFAULT"

    def render_default_value(self, value: DefaultValue, type_text: str | None) -> str:
        text = str(value)
        if "IDENTITY GENERATED BY DEFAULT" in text:
            return "GENERATED BY DEFAULT AS IDENTITY"
        if isinstance(value, DatabaseFunction):
            return self.render_function(value)
        for register, replacement in self._special_registers.items():
            if register in text:
                return replacement
        return super().render_default_value(value, type_text)
