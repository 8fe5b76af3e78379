"""HyperSQL dialect implementation."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect, DialectCapabilities
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.models.statement import DefaultValue, SequenceNextValue


@DialectRegistry.register
class HsqlDialect(Dialect):
    """HSQLDB — sequence-backed defaults are declared as ``GENERATED BY DEFAULT AS SEQUENCE``."""

    aliases = ("hsql",)

    _type_aliases = {
        "DATETIME": "TIMESTAMP",
        "TEXT": "CLOB",
        "NVARCHAR": "VARCHAR",
    }

    @property
    def name(self) -> str:
        return "hsqldb"

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(supports_create_if_not_exists=True)

    @property
    def current_datetime_function(self) -> str:
        return "NOW"

    def default_keyword(self, value: DefaultValue) -> str | None:
        if isinstance(value, SequenceNextValue):
            return None
        return "DEFAULT"

    def sequence_next_value_sql(self, sequence: SequenceNextValue) -> str:
        escaped = self.escape_sequence_name(None, sequence.schema_name, sequence.sequence_name)
        return f"GENERATED BY DEFAULT AS SEQUENCE {escaped}"
