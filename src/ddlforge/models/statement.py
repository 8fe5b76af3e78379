"""Vendor-neutral statement model: tables, columns, constraints, default values."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field


class GenerationType(StrEnum):
    ALWAYS = "ALWAYS"
    BY_DEFAULT = "BY DEFAULT"


class DatabaseFunction(BaseModel):
    """A default value computed by the database, e.g. ``NOW()``."""

    value: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.value


class SequenceNextValue(BaseModel):
    """A default value taken from the next value of a sequence."""

    sequence_name: str = Field(alias="sequenceName")
    schema_name: str | None = Field(None, alias="schemaName")

    model_config = {"populate_by_name": True, "frozen": True}

    def __str__(self) -> str:
        return self.sequence_name


# Structured markers are listed first so mappings validate as markers, not strings.
DefaultValue = DatabaseFunction | SequenceNextValue | bool | int | Decimal | float | str


class NotNullConstraint(BaseModel):
    """NOT NULL on a single column, optionally named."""

    constraint_name: str | None = Field(None, alias="constraintName")
    validate_nullable: bool = Field(True, alias="validateNullable")

    model_config = {"populate_by_name": True, "frozen": True}


class AutoIncrementConstraint(BaseModel):
    """Identity / auto-increment request for a column."""

    column_name: str = Field(alias="columnName")
    start_with: int | None = Field(None, alias="startWith")
    increment_by: int | None = Field(None, alias="incrementBy")
    generation_type: GenerationType | None = Field(None, alias="generationType")
    default_on_null: bool = Field(False, alias="defaultOnNull")

    model_config = {"populate_by_name": True, "frozen": True}


class PrimaryKeyConstraint(BaseModel):
    columns: tuple[str, ...] = ()
    constraint_name: str | None = Field(None, alias="constraintName")
    tablespace: str | None = None
    deferrable: bool = False
    initially_deferred: bool = Field(False, alias="initiallyDeferred")
    validate_primary_key: bool = Field(True, alias="validatePrimaryKey")

    model_config = {"populate_by_name": True, "frozen": True}


class ForeignKeyConstraint(BaseModel):
    """Foreign key from one column of the new table.

    The target is either a raw ``references`` clause (``other(id)``) or the
    explicit referenced table/columns.
    """

    foreign_key_name: str = Field(alias="foreignKeyName")
    column: str
    references: str | None = None
    referenced_table_catalog_name: str | None = Field(None, alias="referencedTableCatalogName")
    referenced_table_schema_name: str | None = Field(None, alias="referencedTableSchemaName")
    referenced_table_name: str | None = Field(None, alias="referencedTableName")
    referenced_column_names: str | None = Field(None, alias="referencedColumnNames")
    delete_cascade: bool = Field(False, alias="deleteCascade")
    deferrable: bool = False
    initially_deferred: bool = Field(False, alias="initiallyDeferred")
    validate_foreign_key: bool = Field(True, alias="validateForeignKey")

    model_config = {"populate_by_name": True, "frozen": True}


class UniqueConstraint(BaseModel):
    constraint_name: str | None = Field(None, alias="constraintName")
    columns: tuple[str, ...] = ()
    validate_unique: bool = Field(True, alias="validateUnique")

    model_config = {"populate_by_name": True, "frozen": True}


class CreateTableStatement(BaseModel):
    """Intent to create one table. Built once by the caller, read-only afterwards."""

    catalog_name: str | None = Field(None, alias="catalogName")
    schema_name: str | None = Field(None, alias="schemaName")
    table_name: str | None = Field(None, alias="tableName")
    table_type: str | None = Field(None, alias="tableType")
    if_not_exists: bool = Field(False, alias="ifNotExists")
    row_dependencies: bool = Field(False, alias="rowDependencies")
    tablespace: str | None = None
    remarks: str | None = None

    columns: tuple[str, ...] = ()
    column_types: dict[str, str | None] = Field(default_factory=dict, alias="columnTypes")
    default_values: dict[str, DefaultValue] = Field(default_factory=dict, alias="defaultValues")
    default_value_constraint_names: dict[str, str] = Field(
        default_factory=dict, alias="defaultValueConstraintNames"
    )
    not_null_columns: dict[str, NotNullConstraint] = Field(
        default_factory=dict, alias="notNullColumns"
    )
    auto_increment_constraints: tuple[AutoIncrementConstraint, ...] = Field(
        (), alias="autoIncrementConstraints"
    )
    primary_key: PrimaryKeyConstraint | None = Field(None, alias="primaryKey")
    foreign_keys: tuple[ForeignKeyConstraint, ...] = Field((), alias="foreignKeys")
    unique_constraints: tuple[UniqueConstraint, ...] = Field((), alias="uniqueConstraints")
    column_remarks: dict[str, str] = Field(default_factory=dict, alias="columnRemarks")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def kind(self) -> str:
        return "createTable"

    @property
    def is_single_column_primary_key(self) -> bool:
        return self.primary_key is not None and len(self.primary_key.columns) == 1

    def auto_increment_for(self, column: str) -> AutoIncrementConstraint | None:
        """Return the first auto-increment constraint naming ``column``."""
        for constraint in self.auto_increment_constraints:
            if constraint.column_name == column:
                return constraint
        return None

    def is_primary_key_column(self, column: str) -> bool:
        return self.primary_key is not None and column in self.primary_key.columns

    def default_value(self, column: str) -> DefaultValue | None:
        return self.default_values.get(column)
