"""DDL dialect plugin system for ddlforge."""

# Import dialects to trigger registration
import ddlforge.dialect.databricks as _databricks  # noqa: F401
import ddlforge.dialect.db2 as _db2  # noqa: F401
import ddlforge.dialect.h2 as _h2  # noqa: F401
import ddlforge.dialect.hsqldb as _hsqldb  # noqa: F401
import ddlforge.dialect.informix as _informix  # noqa: F401
import ddlforge.dialect.mssql as _mssql  # noqa: F401
import ddlforge.dialect.mysql as _mysql  # noqa: F401
import ddlforge.dialect.oracle as _oracle  # noqa: F401
import ddlforge.dialect.postgres as _postgres  # noqa: F401
import ddlforge.dialect.snowflake as _snowflake  # noqa: F401
import ddlforge.dialect.sqlite as _sqlite  # noqa: F401
import ddlforge.dialect.sybase as _sybase  # noqa: F401
from ddlforge.dialect.base import (
    ConstraintNamePosition,
    Dialect,
    DialectCapabilities,
    NativeType,
    StartWithSupport,
    TablespaceKeyword,
)
from ddlforge.dialect.registry import DialectRegistry, UnsupportedDialectError

__all__ = [
    "ConstraintNamePosition",
    "Dialect",
    "DialectCapabilities",
    "DialectRegistry",
    "NativeType",
    "StartWithSupport",
    "TablespaceKeyword",
    "UnsupportedDialectError",
]
