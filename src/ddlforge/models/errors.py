"""Structured validation errors with optional source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in a YAML statement file for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class ValidationError(BaseModel):
    """A structured error with optional source position and suggestions."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None
    suggestions: list[str] = []


class ValidationResult(BaseModel):
    """Result of validating one or more statements."""

    valid: bool
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []


class StatementValidationError(Exception):
    """Raised when a statement fails validation; carries every error found."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        summary = "; ".join(e.message for e in errors)
        super().__init__(f"{len(errors)} validation error(s): {summary}")
