"""Abstract base dialect with capability flags and default DDL rendering helpers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from functools import lru_cache

from ddlforge.models.statement import (
    DatabaseFunction,
    DefaultValue,
    GenerationType,
    SequenceNextValue,
)


@lru_cache(maxsize=None)
def _identifier_pattern(chars: str) -> re.Pattern[str]:
    """Unquoted identifier: a letter or underscore, then letters, digits or ``chars``."""
    return re.compile(rf"^[A-Za-z_][A-Za-z0-9{re.escape(chars)}]*$")


_RESERVED_WORDS = frozenset(
    {
        "ALL", "ALTER", "AND", "AS", "BY", "CASE", "CHECK", "COLUMN", "CONSTRAINT",
        "CREATE", "DEFAULT", "DELETE", "DESC", "DISTINCT", "DROP", "FOREIGN", "FROM",
        "GRANT", "GROUP", "HAVING", "IN", "INDEX", "INSERT", "INTO", "IS", "JOIN",
        "KEY", "LIKE", "NOT", "NULL", "ON", "OR", "ORDER", "PRIMARY", "REFERENCES",
        "SELECT", "SET", "TABLE", "TO", "UNION", "UNIQUE", "UPDATE", "USER", "VALUES",
        "WHERE", "WITH",
    }
)

_NUMERIC_TYPES = frozenset(
    {
        "INT", "INTEGER", "BIGINT", "SMALLINT", "TINYINT", "MEDIUMINT", "NUMBER",
        "NUMERIC", "DECIMAL", "FLOAT", "REAL", "DOUBLE", "DOUBLE PRECISION", "CURRENCY",
    }
)
_BOOLEAN_TYPES = frozenset({"BOOLEAN", "BOOL", "BIT"})
INTEGER_TYPES = frozenset({"INT", "INTEGER", "INT4", "BIGINT", "INT8", "SMALLINT", "INT2", "TINYINT"})

_CURRENT_DATETIME_ALIASES = frozenset(
    {
        "NOW()", "CURRENT_TIMESTAMP", "CURRENT_TIMESTAMP()", "CURRENT TIMESTAMP",
        "CURRENT_DATETIME", "SYSDATE", "SYSTIMESTAMP", "GETDATE()",
    }
)


class TablespaceKeyword(StrEnum):
    TABLESPACE = "TABLESPACE"
    ON = "ON"
    IN = "IN"


class ConstraintNamePosition(StrEnum):
    BEFORE = "before"
    AFTER = "after"


class StartWithSupport(StrEnum):
    """How a dialect realizes an auto-increment start value."""

    INLINE = "inline"
    AUXILIARY_SEQUENCE = "auxiliary_sequence"
    TABLE_OPTION = "table_option"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class DialectCapabilities:
    """Flags indicating which DDL features a dialect supports."""

    supports_create_if_not_exists: bool = False
    supports_primary_key_names: bool = True
    supports_not_null_constraint_names: bool = False
    supports_auto_increment: bool = True
    supports_auto_increment_by: bool = True
    supports_tablespaces: bool = False
    supports_index_tablespace: bool = False
    supports_initially_deferrable_columns: bool = False
    supports_schemas: bool = True
    supports_catalogs: bool = False
    supports_inline_column_comments: bool = False
    supports_table_comment_option: bool = False
    supports_row_dependencies: bool = False
    supports_on_delete_cascade: bool = True
    inline_auto_increment_primary_key: bool = False
    auto_increment_columns_first_in_primary_key: bool = False
    temp_tables_unqualified: bool = False
    requires_named_default_constraint: bool = False
    tablespace_keyword: TablespaceKeyword = TablespaceKeyword.TABLESPACE
    foreign_key_name_position: ConstraintNamePosition = ConstraintNamePosition.BEFORE


@dataclass(frozen=True)
class NativeType:
    """A declared type translated to the dialect's DDL spelling."""

    sql: str
    auto_increment: bool = False

    def __str__(self) -> str:
        return self.sql


def split_type(type_text: str) -> tuple[str, str]:
    """Split ``VARCHAR(50)`` into ``("VARCHAR", "(50)")``."""
    text = type_text.strip()
    paren = text.find("(")
    if paren == -1:
        return text, ""
    return text[:paren].strip(), text[paren:]


class Dialect(ABC):
    """Abstract base for all DDL dialects.

    Provides ANSI-flavoured defaults; dialects override specific methods.
    Instances hold no state and may be shared between threads.
    """

    aliases: tuple[str, ...] = ()
    default_major_version: int | None = None

    _quote_start = '"'
    _quote_end = '"'
    # Characters besides letters and digits allowed in an unquoted identifier
    _identifier_chars = "_"
    _type_aliases: dict[str, str] = {}
    _self_incrementing_types: frozenset[str] = frozenset()

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def capabilities(self) -> DialectCapabilities: ...

    @property
    @abstractmethod
    def current_datetime_function(self) -> str:
        """SQL expression for the current date and time."""

    # -- identifiers ---------------------------------------------------------

    def quote_identifier(self, name: str) -> str:
        """Quote an identifier per dialect rules."""
        escaped = name.replace(self._quote_end, self._quote_end * 2)
        return f"{self._quote_start}{escaped}{self._quote_end}"

    def escape_object_name(self, name: str) -> str:
        """Quote ``name`` only when it is not a plain, non-reserved identifier."""
        simple = _identifier_pattern(self._identifier_chars).match(name)
        if simple and name.upper() not in _RESERVED_WORDS:
            return name
        return self.quote_identifier(name)

    def _qualifiers(self, catalog: str | None, schema: str | None) -> list[str]:
        parts: list[str] = []
        if catalog and self.capabilities.supports_catalogs:
            parts.append(catalog)
        if schema and self.capabilities.supports_schemas:
            parts.append(schema)
        return parts

    def escape_table_name(self, catalog: str | None, schema: str | None, table: str) -> str:
        parts = self._qualifiers(catalog, schema) + [table]
        return ".".join(self.escape_object_name(p) for p in parts)

    def escape_sequence_name(self, catalog: str | None, schema: str | None, sequence: str) -> str:
        return self.escape_table_name(catalog, schema, sequence)

    def escape_column_name(self, column: str, computed: bool = False) -> str:
        """Escape a column name; computed expressions are emitted verbatim."""
        if computed:
            return column
        return self.escape_object_name(column)

    def escape_column_name_list(self, columns: str | Iterable[str]) -> str:
        """Escape a comma separated column list (``"a, b"`` or ``["a", "b"]``)."""
        if isinstance(columns, str):
            columns = columns.split(",")
        return ", ".join(self.escape_column_name(c.strip()) for c in columns if c.strip())

    def normalize_constraint_name(self, name: str) -> str:
        return name

    def escape_constraint_name(self, name: str) -> str:
        return self.escape_object_name(self.normalize_constraint_name(name))

    def escape_string(self, value: str) -> str:
        return value.replace("'", "''")

    # -- types ---------------------------------------------------------------

    def _serial_type(self, base: str, major_version: int | None) -> str | None:
        """Self-incrementing replacement for an integer type, if the dialect has one."""
        return None

    def native_type(
        self,
        type_text: str,
        auto_increment: bool = False,
        major_version: int | None = None,
    ) -> NativeType:
        """Translate a vendor-neutral type into the dialect's DDL type."""
        base, rest = split_type(type_text)
        upper = base.upper()
        if upper in self._self_incrementing_types:
            return NativeType(sql=type_text.strip(), auto_increment=True)
        if auto_increment:
            serial = self._serial_type(upper, major_version)
            if serial is not None:
                return NativeType(sql=serial, auto_increment=True)
        mapped = self._type_aliases.get(upper)
        if mapped is None:
            return NativeType(sql=type_text.strip())
        return NativeType(sql=f"{mapped}{rest}")

    # -- auto-increment ------------------------------------------------------

    def _identity_keyword(
        self, generation_type: GenerationType | None, default_on_null: bool
    ) -> str:
        generation = generation_type or GenerationType.BY_DEFAULT
        return f"GENERATED {generation.value} AS IDENTITY"

    def auto_increment_clause(
        self,
        start_with: int | None = None,
        increment_by: int | None = None,
        generation_type: GenerationType | None = None,
        default_on_null: bool = False,
        major_version: int | None = None,
    ) -> str:
        """Column-level identity clause; empty string means nothing to emit."""
        clause = self._identity_keyword(generation_type, default_on_null)
        options: list[str] = []
        if start_with is not None:
            options.append(f"START WITH {start_with}")
        if increment_by is not None:
            options.append(f"INCREMENT BY {increment_by}")
        if options:
            return f"{clause} ({' '.join(options)})"
        return clause

    def start_with_support(
        self, major_version: int | None, self_incrementing_type: bool = False
    ) -> StartWithSupport:
        return StartWithSupport.INLINE

    def table_option_auto_increment_start(self, start_with: int) -> str | None:
        return None

    def alter_sequence_start_sql(self, sequence: str, start_with: int) -> str:
        return f"ALTER SEQUENCE {sequence} START WITH {start_with}"

    # -- constraints ---------------------------------------------------------

    def generate_primary_key_name(self, table: str) -> str | None:
        return f"PK_{table.upper()}"

    def generate_default_constraint_name(self, table: str, column: str) -> str:
        return f"DF_{table}_{column}"

    def novalidate_clause(self) -> str | None:
        """Phrase disabling validation of existing rows, if the dialect has one."""
        return None

    def initially_deferred_clause(self) -> str | None:
        if self.capabilities.supports_initially_deferrable_columns:
            return "INITIALLY DEFERRED"
        return None

    def deferrable_clause(self) -> str | None:
        if self.capabilities.supports_initially_deferrable_columns:
            return "DEFERRABLE"
        return None

    def requires_explicit_null(self, native_type: NativeType) -> bool:
        """Whether a nullable column of this type must spell out ``NULL``."""
        return False

    # -- default values ------------------------------------------------------

    def default_keyword(self, value: DefaultValue) -> str | None:
        """Keyword introducing a default value; ``None`` when the value stands alone."""
        return "DEFAULT"

    def boolean_literal(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def render_function(self, function: DatabaseFunction) -> str:
        if function.value.strip().upper() in _CURRENT_DATETIME_ALIASES:
            return self.current_datetime_function
        return function.value

    def sequence_next_value_sql(self, sequence: SequenceNextValue) -> str:
        escaped = self.escape_sequence_name(None, sequence.schema_name, sequence.sequence_name)
        return f"NEXT VALUE FOR {escaped}"

    def render_default_value(self, value: DefaultValue, type_text: str | None) -> str:
        """Render a default value as SQL, honouring the column's declared type."""
        match value:
            case SequenceNextValue():
                return self.sequence_next_value_sql(value)
            case DatabaseFunction():
                return self.render_function(value)
            case bool():
                return self.boolean_literal(value)
            case int() | float() | Decimal():
                return str(value)
            case _:
                return self._render_string_default(str(value), type_text)

    def _render_string_default(self, value: str, type_text: str | None) -> str:
        base = split_type(type_text)[0].upper() if type_text else ""
        if base in _NUMERIC_TYPES and _is_number(value):
            return value
        if base in _BOOLEAN_TYPES and value.lower() in ("true", "false"):
            return self.boolean_literal(value.lower() == "true")
        return f"'{self.escape_string(value)}'"


def _is_number(value: str) -> bool:
    try:
        Decimal(value)
    except InvalidOperation:
        return False
    return True
