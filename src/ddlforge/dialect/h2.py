"""H2 dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities
from ddlforge.dialect.registry import DialectRegistry


@DialectRegistry.register
class H2Dialect(Dialect):
    """H2 embedded database — standard identity columns, named NOT NULL not supported."""

    _type_aliases = {
        "DATETIME": "TIMESTAMP",
        "TEXT": "CLOB",
        "NVARCHAR": "VARCHAR",
    }

    @property
    def name(self) -> str:
        return "h2"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(supports_create_if_not_exists=True)

    @property
    def current_datetime_function(self) -> str:
        return "NOW()"
