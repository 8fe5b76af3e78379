"""Pydantic domain models for ddlforge."""

from ddlforge.models.errors import (
    SourceSpan,
    StatementValidationError,
    ValidationError,
    ValidationResult,
)
from ddlforge.models.sql import AffectedObject, ObjectKind, SqlFragment
from ddlforge.models.statement import (
    AutoIncrementConstraint,
    CreateTableStatement,
    DatabaseFunction,
    DefaultValue,
    ForeignKeyConstraint,
    GenerationType,
    NotNullConstraint,
    PrimaryKeyConstraint,
    SequenceNextValue,
    UniqueConstraint,
)

__all__ = [
    "AffectedObject",
    "AutoIncrementConstraint",
    "CreateTableStatement",
    "DatabaseFunction",
    "DefaultValue",
    "ForeignKeyConstraint",
    "GenerationType",
    "NotNullConstraint",
    "ObjectKind",
    "PrimaryKeyConstraint",
    "SequenceNextValue",
    "SourceSpan",
    "SqlFragment",
    "StatementValidationError",
    "UniqueConstraint",
    "ValidationError",
    "ValidationResult",
]
