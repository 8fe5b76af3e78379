"""Statement file loading for ddlforge."""

from ddlforge.parser.loader import SourceMap, StatementLoader, YAMLSafetyError
from ddlforge.parser.statements import StatementReader

__all__ = [
    "SourceMap",
    "StatementLoader",
    "StatementReader",
    "YAMLSafetyError",
]
