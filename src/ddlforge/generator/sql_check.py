"""Post-generation SQL syntax check using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import SqlglotError

# Map ddlforge dialect names to sqlglot dialect identifiers.
# Dialects sqlglot cannot parse are skipped rather than guessed.
_DIALECT_MAP: dict[str, str] = {
    "postgresql": "postgres",
    "mysql": "mysql",
    "mariadb": "mysql",
    "oracle": "oracle",
    "mssql": "tsql",
    "sqlite": "sqlite",
    "snowflake": "snowflake",
    "databricks": "databricks",
}


def check_sql(sql: str, dialect_name: str) -> list[str]:
    """Parse SQL with sqlglot for the given dialect.

    Returns a list of error messages (empty if valid or not checkable).
    The check is non-blocking — callers should treat errors as warnings.
    """
    sg_dialect = _DIALECT_MAP.get(dialect_name)
    if sg_dialect is None:
        return []

    errors: list[str] = []
    try:
        sqlglot.transpile(sql, read=sg_dialect)
    except SqlglotError as exc:
        errors.append(str(exc))
    return errors


def is_checkable(dialect_name: str) -> bool:
    return dialect_name in _DIALECT_MAP
