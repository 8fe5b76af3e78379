"""CREATE TABLE assembly: columns, keys, unique constraints and table options per dialect."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ddlforge.dialect.base import (
    ConstraintNamePosition,
    Dialect,
    NativeType,
    StartWithSupport,
)
from ddlforge.generator.auxiliary import AuxiliaryStatementEmitter
from ddlforge.generator.base import GenerationContext, SqlGenerator
from ddlforge.generator.registry import GeneratorRegistry
from ddlforge.generator.validator import CreateTableValidator
from ddlforge.models.errors import ValidationError
from ddlforge.models.sql import AffectedObject, ObjectKind, SqlFragment
from ddlforge.models.statement import (
    AutoIncrementConstraint,
    CreateTableStatement,
    DefaultValue,
    ForeignKeyConstraint,
    UniqueConstraint,
)


@dataclass
class _ColumnPass:
    """Facts gathered while walking the columns of one statement."""

    auto_increment_columns: list[str] = field(default_factory=list)
    primary_key_auto_increment: bool = False
    table_option_start_with: int | None = None
    table_option_requests: int = 0


@dataclass
class _MergedUnique:
    columns: list[str]
    validate: bool


def merge_unique_constraints(
    constraints: Iterable[UniqueConstraint],
) -> list[UniqueConstraint]:
    """Combine unique constraints that share a name.

    Unnamed constraints come first in declared order, then one constraint per
    name in first-seen order. Columns keep first-seen order; a merged
    constraint validates if any contributor asked for validation. The input
    constraints are left untouched.
    """
    unnamed: list[UniqueConstraint] = []
    named: dict[str, _MergedUnique] = {}
    for constraint in constraints:
        name = constraint.constraint_name
        if name is None:
            unnamed.append(constraint)
            continue
        merged = named.get(name)
        if merged is None:
            named[name] = _MergedUnique(
                columns=list(dict.fromkeys(constraint.columns)),
                validate=constraint.validate_unique,
            )
            continue
        merged.columns.extend(c for c in constraint.columns if c not in merged.columns)
        merged.validate = merged.validate or constraint.validate_unique

    return unnamed + [
        UniqueConstraint(
            constraint_name=name,
            columns=tuple(merged.columns),
            validate_unique=merged.validate,
        )
        for name, merged in named.items()
    ]


@GeneratorRegistry.register
class CreateTableGenerator(SqlGenerator):
    """Generic CREATE TABLE generator; dialect differences come from capability queries."""

    statement_kind = "createTable"

    def __init__(self) -> None:
        self._validator = CreateTableValidator()

    def validate(
        self, statement: CreateTableStatement, dialect: Dialect
    ) -> list[ValidationError]:
        return self._validator.validate(statement, dialect)

    def generate(
        self, statement: CreateTableStatement, context: GenerationContext
    ) -> list[SqlFragment]:
        dialect = context.dialect
        emitter = AuxiliaryStatementEmitter(dialect)
        state = _ColumnPass()

        definitions = [
            self._column_definition(statement, column, context, emitter, state)
            for column in statement.columns
        ]

        if not self._primary_key_inlined(statement, dialect, state):
            primary_key = self._primary_key_clause(statement, dialect, state)
            if primary_key:
                definitions.append(primary_key)

        for foreign_key in statement.foreign_keys:
            definitions.append(self._foreign_key_clause(statement, foreign_key, context))

        for unique in merge_unique_constraints(statement.unique_constraints):
            definitions.append(self._unique_clause(unique, dialect))

        sql = f"{self._create_clause(statement, dialect)} ({', '.join(definitions)})"
        options = self._table_options(statement, context, state)
        if options:
            sql += " " + " ".join(options)

        primary = SqlFragment(
            sql=sql,
            affected=AffectedObject(
                kind=ObjectKind.TABLE,
                name=statement.table_name or "",
                schema_name=statement.schema_name,
                catalog_name=statement.catalog_name,
            ),
        )
        return [primary, *emitter.fragments()]

    # -- table header ---------------------------------------------------------

    def _create_clause(self, statement: CreateTableStatement, dialect: Dialect) -> str:
        parts = ["CREATE"]
        if statement.table_type and statement.table_type.strip():
            parts.append(statement.table_type.strip().upper())
        parts.append("TABLE")
        if statement.if_not_exists and dialect.capabilities.supports_create_if_not_exists:
            parts.append("IF NOT EXISTS")
        parts.append(self._table_name(statement, dialect))
        return " ".join(parts)

    def _table_name(self, statement: CreateTableStatement, dialect: Dialect) -> str:
        table = statement.table_name or ""
        table_type = (statement.table_type or "").strip().lower()
        # Temporary tables live in a per-session schema on some databases.
        if dialect.capabilities.temp_tables_unqualified and "temp" in table_type:
            return dialect.escape_object_name(table)
        return dialect.escape_table_name(statement.catalog_name, statement.schema_name, table)

    # -- columns ----------------------------------------------------------------

    def _column_definition(
        self,
        statement: CreateTableStatement,
        column: str,
        context: GenerationContext,
        emitter: AuxiliaryStatementEmitter,
        state: _ColumnPass,
    ) -> str:
        dialect = context.dialect
        auto_increment = statement.auto_increment_for(column)
        is_primary_key = statement.is_primary_key_column(column)
        if auto_increment is not None:
            state.auto_increment_columns.append(column)
            state.primary_key_auto_increment = state.primary_key_auto_increment or is_primary_key

        type_text = statement.column_types.get(column)
        native: NativeType | None = None
        if type_text is None or not type_text.strip():
            parts = [dialect.escape_column_name(column, computed=True)]
        else:
            native = dialect.native_type(
                type_text, auto_increment is not None, context.major_version
            )
            parts = [dialect.escape_column_name(column), native.sql]

        if (
            dialect.capabilities.inline_auto_increment_primary_key
            and statement.is_single_column_primary_key
            and is_primary_key
            and auto_increment is not None
        ):
            parts.extend(self._inline_primary_key(statement, dialect))

        default = statement.default_value(column)
        if default is not None and native is not None and not native.auto_increment:
            parts.extend(self._default_value(statement, column, default, dialect))

        if auto_increment is not None:
            parts.extend(
                self._auto_increment(statement, auto_increment, native, context, emitter, state)
            )

        parts.extend(self._nullability(statement, column, native, dialect))

        remark = statement.column_remarks.get(column)
        if remark is not None and dialect.capabilities.supports_inline_column_comments:
            parts.append(f"COMMENT '{dialect.escape_string(remark)}'")

        return " ".join(parts)

    def _inline_primary_key(
        self, statement: CreateTableStatement, dialect: Dialect
    ) -> list[str]:
        assert statement.primary_key is not None
        name = _trim_to_none(statement.primary_key.constraint_name)
        if name is None:
            name = dialect.generate_primary_key_name(statement.table_name or "")
        parts: list[str] = []
        if name is not None:
            parts.extend(["CONSTRAINT", dialect.escape_constraint_name(name)])
        parts.append("PRIMARY KEY")
        return parts

    def _default_value(
        self,
        statement: CreateTableStatement,
        column: str,
        value: DefaultValue,
        dialect: Dialect,
    ) -> list[str]:
        parts: list[str] = []
        if dialect.capabilities.requires_named_default_constraint:
            name = statement.default_value_constraint_names.get(column)
            if name is None:
                name = dialect.generate_default_constraint_name(statement.table_name or "", column)
            parts.extend(["CONSTRAINT", dialect.escape_constraint_name(name)])
        keyword = dialect.default_keyword(value)
        if keyword:
            parts.append(keyword)
        parts.append(dialect.render_default_value(value, statement.column_types.get(column)))
        return parts

    def _auto_increment(
        self,
        statement: CreateTableStatement,
        constraint: AutoIncrementConstraint,
        native: NativeType | None,
        context: GenerationContext,
        emitter: AuxiliaryStatementEmitter,
        state: _ColumnPass,
    ) -> list[str]:
        dialect = context.dialect
        if not dialect.capabilities.supports_auto_increment:
            context.diagnostics.warning(
                f"{dialect.name} does not support autoincrement columns as requested for "
                f"{self._table_name(statement, dialect)}"
            )
            return []

        self_incrementing = native is not None and native.auto_increment
        parts: list[str] = []
        if not self_incrementing:
            clause = dialect.auto_increment_clause(
                constraint.start_with,
                constraint.increment_by,
                constraint.generation_type,
                constraint.default_on_null,
                major_version=context.major_version,
            )
            if clause:
                parts.append(clause)

        if constraint.start_with is None:
            return parts

        match dialect.start_with_support(context.major_version, self_incrementing):
            case StartWithSupport.AUXILIARY_SEQUENCE:
                emitter.sequence_start(
                    statement.catalog_name,
                    statement.schema_name,
                    statement.table_name or "",
                    constraint.column_name,
                    constraint.start_with,
                )
            case StartWithSupport.TABLE_OPTION:
                # One option per table: the last column processed wins.
                state.table_option_start_with = constraint.start_with
                state.table_option_requests += 1
            case StartWithSupport.UNSUPPORTED:
                context.diagnostics.warning(
                    f"{dialect.name} cannot set a start value for auto-increment column "
                    f"{constraint.column_name}; ignoring startWith={constraint.start_with}"
                )
            case StartWithSupport.INLINE:
                pass
        return parts

    def _nullability(
        self,
        statement: CreateTableStatement,
        column: str,
        native: NativeType | None,
        dialect: Dialect,
    ) -> list[str]:
        constraint = statement.not_null_columns.get(column)
        if constraint is None:
            # A primary key column may never be declared NULL.
            if (
                native is not None
                and not statement.is_primary_key_column(column)
                and dialect.requires_explicit_null(native)
            ):
                return ["NULL"]
            return []

        parts: list[str] = []
        name = _trim_to_none(constraint.constraint_name)
        if name is not None and dialect.capabilities.supports_not_null_constraint_names:
            parts.extend(["CONSTRAINT", dialect.escape_constraint_name(name)])
        parts.append("NOT NULL")
        if not constraint.validate_nullable:
            novalidate = dialect.novalidate_clause()
            if novalidate:
                parts.append(novalidate)
        return parts

    # -- table constraints ------------------------------------------------------

    def _primary_key_inlined(
        self, statement: CreateTableStatement, dialect: Dialect, state: _ColumnPass
    ) -> bool:
        return (
            dialect.capabilities.inline_auto_increment_primary_key
            and statement.is_single_column_primary_key
            and state.primary_key_auto_increment
        )

    def _primary_key_name_position(self) -> ConstraintNamePosition:
        return ConstraintNamePosition.BEFORE

    def _primary_key_clause(
        self, statement: CreateTableStatement, dialect: Dialect, state: _ColumnPass
    ) -> str | None:
        primary_key = statement.primary_key
        if primary_key is None or not primary_key.columns:
            return None
        caps = dialect.capabilities

        name_clause: str | None = None
        if caps.supports_primary_key_names:
            name = _trim_to_none(primary_key.constraint_name)
            if name is None:
                name = dialect.generate_primary_key_name(statement.table_name or "")
            if name is not None:
                name_clause = f"CONSTRAINT {dialect.escape_constraint_name(name)}"

        columns = self._primary_key_columns(
            primary_key.columns, dialect, state.auto_increment_columns
        )
        parts = [f"PRIMARY KEY ({dialect.escape_column_name_list(columns)})"]
        if primary_key.tablespace and caps.supports_index_tablespace:
            parts.append(f"USING INDEX TABLESPACE {primary_key.tablespace}")
        if not primary_key.validate_primary_key:
            novalidate = dialect.novalidate_clause()
            if novalidate:
                parts.append(novalidate)
        if caps.supports_initially_deferrable_columns:
            if primary_key.initially_deferred:
                parts.append("INITIALLY DEFERRED")
            if primary_key.deferrable:
                parts.append("DEFERRABLE")

        if name_clause is not None:
            if self._primary_key_name_position() is ConstraintNamePosition.AFTER:
                parts.insert(1, name_clause)
            else:
                parts.insert(0, name_clause)
        return " ".join(parts)

    def _primary_key_columns(
        self,
        columns: Sequence[str],
        dialect: Dialect,
        auto_increment_columns: list[str],
    ) -> list[str]:
        """Order key columns as the dialect expects; the statement's tuple is not modified."""
        if not dialect.capabilities.auto_increment_columns_first_in_primary_key:
            return list(columns)
        leading = [c for c in auto_increment_columns if c in columns]
        return leading + [c for c in columns if c not in leading]

    def _foreign_key_clause(
        self,
        statement: CreateTableStatement,
        foreign_key: ForeignKeyConstraint,
        context: GenerationContext,
    ) -> str:
        dialect = context.dialect
        caps = dialect.capabilities
        name_clause = f"CONSTRAINT {dialect.escape_constraint_name(foreign_key.foreign_key_name)}"
        name_after = caps.foreign_key_name_position is ConstraintNamePosition.AFTER

        parts: list[str] = []
        if not name_after:
            parts.append(name_clause)
        parts.append(
            f"FOREIGN KEY ({dialect.escape_column_name(foreign_key.column)}) "
            f"REFERENCES {self._references(foreign_key, context)}"
        )
        if foreign_key.delete_cascade and caps.supports_on_delete_cascade:
            parts.append("ON DELETE CASCADE")
        if name_after:
            parts.append(name_clause)
        if foreign_key.initially_deferred:
            deferred = dialect.initially_deferred_clause()
            if deferred:
                parts.append(deferred)
        if foreign_key.deferrable:
            deferrable = dialect.deferrable_clause()
            if deferrable:
                parts.append(deferrable)
        if not foreign_key.validate_foreign_key:
            novalidate = dialect.novalidate_clause()
            if novalidate:
                parts.append(novalidate)
        return " ".join(parts)

    def _references(self, foreign_key: ForeignKeyConstraint, context: GenerationContext) -> str:
        dialect = context.dialect
        caps = dialect.capabilities
        if foreign_key.references is not None:
            references = foreign_key.references
            if (
                "." not in references
                and context.default_schema
                and context.output_default_schema
                and (caps.supports_schemas or caps.supports_catalogs)
            ):
                references = f"{dialect.escape_object_name(context.default_schema)}.{references}"
            return references

        table = dialect.escape_table_name(
            foreign_key.referenced_table_catalog_name,
            foreign_key.referenced_table_schema_name,
            foreign_key.referenced_table_name or "",
        )
        columns = dialect.escape_column_name_list(foreign_key.referenced_column_names or "")
        if not columns:
            # Without a column list the reference targets the parent's primary key.
            return table
        return f"{table}({columns})"

    def _unique_clause(self, unique: UniqueConstraint, dialect: Dialect) -> str:
        parts: list[str] = []
        if unique.constraint_name is not None:
            parts.extend(["CONSTRAINT", dialect.escape_constraint_name(unique.constraint_name)])
        parts.append(f"UNIQUE ({dialect.escape_column_name_list(unique.columns)})")
        if not unique.validate_unique:
            novalidate = dialect.novalidate_clause()
            if novalidate:
                parts.append(novalidate)
        return " ".join(parts)

    # -- table options ------------------------------------------------------------

    def _table_options(
        self,
        statement: CreateTableStatement,
        context: GenerationContext,
        state: _ColumnPass,
    ) -> list[str]:
        dialect = context.dialect
        caps = dialect.capabilities
        options: list[str] = []

        if state.table_option_start_with is not None:
            option = dialect.table_option_auto_increment_start(state.table_option_start_with)
            if option:
                context.diagnostics.info(
                    f"[{dialect.name}] Using last startWith statement "
                    f"({state.table_option_start_with}) as table option"
                    + (
                        f" ({state.table_option_requests} columns requested one)"
                        if state.table_option_requests > 1
                        else ""
                    )
                )
                options.append(option)

        if statement.tablespace and caps.supports_tablespaces:
            options.append(f"{caps.tablespace_keyword.value} {statement.tablespace}")

        if statement.remarks is not None and caps.supports_table_comment_option:
            options.append(f"COMMENT='{dialect.escape_string(statement.remarks)}'")

        if statement.row_dependencies and caps.supports_row_dependencies:
            options.append("ROWDEPENDENCIES")

        return options


def _trim_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
