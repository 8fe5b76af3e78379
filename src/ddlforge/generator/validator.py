"""Pre-generation checks for CREATE TABLE statements."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect
from ddlforge.models.errors import ValidationError
from ddlforge.models.statement import CreateTableStatement


class CreateTableValidator:
    """Checks structural preconditions and dialect-specific disallowed fields.

    Problems are returned as a batch; only caller misuse (``None`` inputs)
    raises.
    """

    def validate(
        self, statement: CreateTableStatement, dialect: Dialect
    ) -> list[ValidationError]:
        if statement is None:
            raise TypeError("statement must not be None")
        if dialect is None:
            raise TypeError("dialect must not be None")

        errors: list[ValidationError] = []
        errors.extend(self._check_required_fields(statement))
        errors.extend(self._check_disallowed_fields(statement, dialect))
        errors.extend(self._check_column_references(statement))
        return errors

    def _check_required_fields(self, statement: CreateTableStatement) -> list[ValidationError]:
        errors: list[ValidationError] = []
        if not statement.table_name or not statement.table_name.strip():
            errors.append(_required("tableName"))
        if not statement.columns:
            errors.append(_required("columns"))
        for i, foreign_key in enumerate(statement.foreign_keys):
            if foreign_key.references is None and not foreign_key.referenced_table_name:
                errors.append(_required(f"foreignKeys[{i}].referencedTableName"))
        return errors

    def _check_disallowed_fields(
        self, statement: CreateTableStatement, dialect: Dialect
    ) -> list[ValidationError]:
        """``incrementBy`` only where the dialect can express a step."""
        errors: list[ValidationError] = []
        if dialect.capabilities.supports_auto_increment_by:
            return errors
        for i, constraint in enumerate(statement.auto_increment_constraints):
            if constraint.increment_by is not None:
                errors.append(
                    ValidationError(
                        code="DISALLOWED_FIELD",
                        message=f"incrementBy is not allowed on {dialect.name}",
                        path=f"autoIncrementConstraints[{i}].incrementBy",
                    )
                )
        return errors

    def _check_column_references(self, statement: CreateTableStatement) -> list[ValidationError]:
        """Every column named by a mapping or constraint must be declared."""
        if not statement.columns:
            return []
        declared = set(statement.columns)
        errors: list[ValidationError] = []

        def _check(column: str, path: str) -> None:
            if column not in declared:
                errors.append(
                    ValidationError(
                        code="UNKNOWN_COLUMN",
                        message=f"Column '{column}' is not declared in table columns",
                        path=path,
                        suggestions=sorted(declared),
                    )
                )

        for mapping_name, mapping in (
            ("columnTypes", statement.column_types),
            ("defaultValues", statement.default_values),
            ("notNullColumns", statement.not_null_columns),
            ("columnRemarks", statement.column_remarks),
        ):
            for column in mapping:
                _check(column, f"{mapping_name}.{column}")

        for i, auto_increment in enumerate(statement.auto_increment_constraints):
            _check(auto_increment.column_name, f"autoIncrementConstraints[{i}].columnName")

        if statement.primary_key is not None:
            for column in statement.primary_key.columns:
                _check(column, "primaryKey.columns")

        for i, unique in enumerate(statement.unique_constraints):
            for column in unique.columns:
                _check(column, f"uniqueConstraints[{i}].columns")

        for i, foreign_key in enumerate(statement.foreign_keys):
            _check(foreign_key.column, f"foreignKeys[{i}].column")

        return errors


def _required(field_name: str) -> ValidationError:
    return ValidationError(
        code="REQUIRED_FIELD_MISSING",
        message=f"{field_name} is required",
        path=field_name,
    )
