"""Tests for CREATE TABLE assembly across dialects."""

from __future__ import annotations

import re

import pytest

from ddlforge.dialect import DialectRegistry
from ddlforge.generator.base import Diagnostics, GenerationContext
from ddlforge.generator.create_table import CreateTableGenerator, merge_unique_constraints
from ddlforge.generator.informix import InformixCreateTableGenerator
from ddlforge.generator.registry import GeneratorRegistry
from ddlforge.models.sql import ObjectKind
from ddlforge.models.statement import (
    AutoIncrementConstraint,
    CreateTableStatement,
    DatabaseFunction,
    ForeignKeyConstraint,
    NotNullConstraint,
    PrimaryKeyConstraint,
    SequenceNextValue,
    UniqueConstraint,
)


def _generate(
    statement: CreateTableStatement,
    dialect: str,
    major_version: int | None = None,
    default_schema: str | None = None,
    output_default_schema: bool = True,
    diagnostics: Diagnostics | None = None,
):
    resolved = DialectRegistry.get(dialect)
    context = GenerationContext(
        dialect=resolved,
        major_version=major_version,
        default_schema=default_schema,
        output_default_schema=output_default_schema,
        diagnostics=diagnostics or Diagnostics(),
    )
    return GeneratorRegistry.get("createTable", resolved).generate(statement, context)


def _sql(statement: CreateTableStatement, dialect: str, **kwargs) -> str:
    return _generate(statement, dialect, **kwargs)[0].sql


def _table(**kwargs) -> CreateTableStatement:
    kwargs.setdefault("table_name", "t")
    return CreateTableStatement(**kwargs)


class TestStructure:
    def test_mysql_auto_increment_table(self) -> None:
        stmt = _table(
            table_name="T",
            columns=("id", "name"),
            column_types={"id": "INT", "name": "VARCHAR(50)"},
            auto_increment_constraints=(AutoIncrementConstraint(column_name="id"),),
            primary_key=PrimaryKeyConstraint(columns=("id",)),
        )
        assert (
            _sql(stmt, "mysql")
            == "CREATE TABLE T (id INT AUTO_INCREMENT, name VARCHAR(50) NULL, PRIMARY KEY (id))"
        )

    @pytest.mark.parametrize(
        "dialect",
        ["postgresql", "mysql", "oracle", "mssql", "sqlite", "db2", "informix", "snowflake"],
    )
    def test_balanced_and_no_dangling_separator(
        self, dialect: str, orders_table: CreateTableStatement
    ) -> None:
        stmt = orders_table.model_copy(
            update={
                "foreign_keys": (
                    ForeignKeyConstraint(
                        foreign_key_name="fk_note", column="note", references="notes(id)"
                    ),
                ),
                "unique_constraints": (UniqueConstraint(columns=("note",)),),
            }
        )
        sql = _sql(stmt, dialect)
        assert sql.count("(") == sql.count(")")
        assert not re.search(r",\s*\)", sql)
        assert ",," not in sql

    def test_columns_emitted_in_declared_order(self) -> None:
        stmt = _table(
            columns=("zeta", "alpha", "mid"),
            column_types={"zeta": "INT", "alpha": "INT", "mid": "INT"},
        )
        sql = _sql(stmt, "postgresql")
        assert sql.index("zeta") < sql.index("alpha") < sql.index("mid")

    def test_column_without_type_is_emitted_verbatim(self) -> None:
        stmt = _table(columns=("id", "total AS (price * qty)"), column_types={"id": "INT"})
        assert _sql(stmt, "mysql").endswith("(id INT NULL, total AS (price * qty))")

    def test_if_not_exists_only_where_supported(self) -> None:
        stmt = _table(columns=("a",), column_types={"a": "INT"}, if_not_exists=True)
        assert _sql(stmt, "postgresql").startswith("CREATE TABLE IF NOT EXISTS t (")
        assert _sql(stmt, "oracle").startswith("CREATE TABLE t (")

    def test_table_type_and_qualified_name(self) -> None:
        stmt = _table(
            schema_name="app", table_type="global temporary", columns=("a",),
            column_types={"a": "INT"},
        )
        assert _sql(stmt, "oracle").startswith("CREATE GLOBAL TEMPORARY TABLE app.t (")

    def test_postgres_temp_tables_unqualified(self) -> None:
        stmt = _table(
            schema_name="app", table_type="TEMPORARY", columns=("a",), column_types={"a": "INT"}
        )
        assert _sql(stmt, "postgresql").startswith("CREATE TEMPORARY TABLE t (")

    def test_primary_fragment_affects_table(self, orders_table: CreateTableStatement) -> None:
        fragments = _generate(orders_table.model_copy(update={"schema_name": "app"}), "postgresql")
        affected = fragments[0].affected
        assert affected is not None
        assert affected.kind is ObjectKind.TABLE
        assert affected.name == "orders"
        assert affected.schema_name == "app"


class TestIdempotence:
    def test_same_input_same_output(self, orders_table: CreateTableStatement) -> None:
        stmt = orders_table.model_copy(
            update={
                "unique_constraints": (
                    UniqueConstraint(constraint_name="u1", columns=("note",)),
                    UniqueConstraint(constraint_name="u1", columns=("id",)),
                )
            }
        )
        before = stmt.model_dump()
        first = _generate(stmt, "mysql", major_version=8)
        second = _generate(stmt, "mysql", major_version=8)
        assert first == second
        assert stmt.model_dump() == before

    def test_primary_key_reordering_does_not_touch_statement(self) -> None:
        stmt = _table(
            columns=("tenant", "id"),
            column_types={"tenant": "INT", "id": "INT"},
            auto_increment_constraints=(AutoIncrementConstraint(column_name="id"),),
            primary_key=PrimaryKeyConstraint(columns=("tenant", "id")),
        )
        assert "PRIMARY KEY (id, tenant)" in _sql(stmt, "mysql")
        assert "CONSTRAINT PK_T PRIMARY KEY (tenant, id)" in _sql(stmt, "postgresql")
        assert stmt.primary_key is not None
        assert stmt.primary_key.columns == ("tenant", "id")


class TestPrimaryKey:
    def test_generated_name(self, orders_table: CreateTableStatement) -> None:
        sql = _sql(orders_table, "postgresql", major_version=12)
        assert sql.endswith("CONSTRAINT PK_ORDERS PRIMARY KEY (id))")

    def test_explicit_name_trimmed(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            primary_key=PrimaryKeyConstraint(columns=("a",), constraint_name="  pk_custom "),
        )
        assert "CONSTRAINT pk_custom PRIMARY KEY (a)" in _sql(stmt, "postgresql")
        assert "CONSTRAINT PK_CUSTOM PRIMARY KEY (a)" in _sql(stmt, "oracle")

    def test_index_tablespace_and_deferral(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            primary_key=PrimaryKeyConstraint(
                columns=("a",), tablespace="idx_ts", deferrable=True, initially_deferred=True
            ),
        )
        assert (
            "CONSTRAINT PK_T PRIMARY KEY (a) USING INDEX TABLESPACE idx_ts "
            "INITIALLY DEFERRED DEFERRABLE" in _sql(stmt, "postgresql")
        )
        mssql = _sql(stmt, "mssql")
        assert "USING INDEX" not in mssql
        assert "DEFERRABLE" not in mssql

    def test_novalidate_primary_key(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            primary_key=PrimaryKeyConstraint(columns=("a",), validate_primary_key=False),
        )
        assert "PRIMARY KEY (a) ENABLE NOVALIDATE" in _sql(stmt, "oracle")
        assert "NOVALIDATE" not in _sql(stmt, "postgresql")

    def test_sqlite_inline_primary_key(self) -> None:
        stmt = _table(
            columns=("id", "name"),
            column_types={"id": "INT", "name": "TEXT"},
            auto_increment_constraints=(AutoIncrementConstraint(column_name="id"),),
            primary_key=PrimaryKeyConstraint(columns=("id",)),
        )
        sql = _sql(stmt, "sqlite")
        assert sql == (
            "CREATE TABLE t (id INTEGER CONSTRAINT PK_T PRIMARY KEY AUTOINCREMENT, name TEXT)"
        )
        assert sql.count("PRIMARY KEY") == 1

    def test_sqlite_composite_key_stays_table_level(self) -> None:
        stmt = _table(
            columns=("a", "b"),
            column_types={"a": "INT", "b": "INT"},
            primary_key=PrimaryKeyConstraint(columns=("a", "b")),
        )
        assert _sql(stmt, "sqlite").endswith("CONSTRAINT PK_T PRIMARY KEY (a, b))")

    def test_informix_name_after_key(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            primary_key=PrimaryKeyConstraint(columns=("a",), constraint_name="pk_a"),
        )
        assert isinstance(
            GeneratorRegistry.get("createTable", DialectRegistry.get("informix")),
            InformixCreateTableGenerator,
        )
        assert _sql(stmt, "informix").endswith("PRIMARY KEY (a) CONSTRAINT pk_a)")


class TestAutoIncrement:
    def test_postgres_9_start_value_uses_sequence(self, orders_table: CreateTableStatement) -> None:
        stmt = orders_table.model_copy(
            update={
                "auto_increment_constraints": (
                    AutoIncrementConstraint(column_name="id", start_with=100),
                )
            }
        )
        fragments = _generate(stmt, "postgresql", major_version=9)
        assert len(fragments) == 2
        assert fragments[0].sql == (
            "CREATE TABLE orders (id SERIAL, note VARCHAR(200), "
            "CONSTRAINT PK_ORDERS PRIMARY KEY (id))"
        )
        assert fragments[1].sql == "ALTER SEQUENCE orders_id_seq START WITH 100"
        assert fragments[1].affected is not None
        assert fragments[1].affected.kind is ObjectKind.SEQUENCE
        assert fragments[1].affected.name == "orders_id_seq"

    def test_postgres_sequence_qualified_by_schema(self, orders_table: CreateTableStatement) -> None:
        stmt = orders_table.model_copy(
            update={
                "schema_name": "app",
                "auto_increment_constraints": (
                    AutoIncrementConstraint(column_name="id", start_with=7),
                ),
            }
        )
        fragments = _generate(stmt, "postgresql", major_version=9)
        assert fragments[1].sql == "ALTER SEQUENCE app.orders_id_seq START WITH 7"

    def test_postgres_identity_inline(self, orders_table: CreateTableStatement) -> None:
        stmt = orders_table.model_copy(
            update={
                "auto_increment_constraints": (
                    AutoIncrementConstraint(column_name="id", start_with=100, increment_by=10),
                )
            }
        )
        fragments = _generate(stmt, "postgresql", major_version=12)
        assert len(fragments) == 1
        assert (
            "id INT GENERATED BY DEFAULT AS IDENTITY (START WITH 100 INCREMENT BY 10)"
            in fragments[0].sql
        )

    def test_postgres_without_start_has_no_aux(self, orders_table: CreateTableStatement) -> None:
        assert len(_generate(orders_table, "postgresql", major_version=9)) == 1

    def test_mssql_identity(self) -> None:
        stmt = _table(
            columns=("id",),
            column_types={"id": "INT"},
            auto_increment_constraints=(AutoIncrementConstraint(column_name="id", start_with=5),),
        )
        assert _sql(stmt, "mssql") == "CREATE TABLE t (id INT IDENTITY (5, 1))"

    def test_mysql_table_option_last_wins(self) -> None:
        # Only one AUTO_INCREMENT= option exists per table; the last column's value is kept
        # even though the earlier request is lost.
        stmt = _table(
            columns=("a", "b"),
            column_types={"a": "INT", "b": "INT"},
            auto_increment_constraints=(
                AutoIncrementConstraint(column_name="a", start_with=10),
                AutoIncrementConstraint(column_name="b", start_with=20),
            ),
        )
        diagnostics = Diagnostics()
        sql = _sql(stmt, "mysql", diagnostics=diagnostics)
        assert sql.endswith(") AUTO_INCREMENT=20")
        assert "AUTO_INCREMENT=10" not in sql
        assert any("(20)" in notice and "2 columns" in notice for notice in diagnostics.notices)

    def test_unsupported_start_value_warns(self) -> None:
        stmt = _table(
            columns=("id",),
            column_types={"id": "INT"},
            auto_increment_constraints=(AutoIncrementConstraint(column_name="id", start_with=5),),
            primary_key=PrimaryKeyConstraint(columns=("id",)),
        )
        diagnostics = Diagnostics()
        sql = _sql(stmt, "sqlite", diagnostics=diagnostics)
        assert "5" not in sql
        assert len(diagnostics.warnings) == 1
        assert "startWith=5" in diagnostics.warnings[0]

    def test_informix_serial_column(self) -> None:
        stmt = _table(
            columns=("id",),
            column_types={"id": "INT"},
            auto_increment_constraints=(AutoIncrementConstraint(column_name="id"),),
        )
        assert _sql(stmt, "informix") == "CREATE TABLE t (id SERIAL)"

    def test_oracle_generation_type(self) -> None:
        stmt = _table(
            columns=("id",),
            column_types={"id": "NUMBER(10)"},
            auto_increment_constraints=(
                AutoIncrementConstraint(column_name="id", generation_type="ALWAYS"),
            ),
        )
        assert _sql(stmt, "oracle") == (
            "CREATE TABLE t (id NUMBER(10) GENERATED ALWAYS AS IDENTITY)"
        )


class TestNullabilityAndDefaults:
    @pytest.fixture
    def people(self) -> CreateTableStatement:
        return _table(
            table_name="people",
            columns=("id", "email"),
            column_types={"id": "INT", "email": "VARCHAR(100)"},
            not_null_columns={"email": NotNullConstraint(constraint_name="nn_email")},
        )

    def test_named_not_null_on_oracle(self, people: CreateTableStatement) -> None:
        assert "email VARCHAR2(100) CONSTRAINT NN_EMAIL NOT NULL" in _sql(people, "oracle")

    def test_named_not_null_dropped_on_mysql(self, people: CreateTableStatement) -> None:
        sql = _sql(people, "mysql")
        assert "email VARCHAR(100) NOT NULL" in sql
        assert "CONSTRAINT" not in sql
        assert "id INT NULL" in sql

    def test_not_null_novalidate(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            not_null_columns={"a": NotNullConstraint(validate_nullable=False)},
        )
        assert "a INTEGER NOT NULL ENABLE NOVALIDATE" in _sql(stmt, "oracle")
        assert _sql(stmt, "postgresql") == "CREATE TABLE t (a INT NOT NULL)"

    def test_default_values(self) -> None:
        stmt = _table(
            columns=("status", "qty", "active", "created"),
            column_types={
                "status": "VARCHAR(10)",
                "qty": "INT",
                "active": "BOOLEAN",
                "created": "TIMESTAMP",
            },
            default_values={
                "status": "new",
                "qty": "0",
                "active": True,
                "created": DatabaseFunction(value="CURRENT_TIMESTAMP"),
            },
        )
        assert _sql(stmt, "postgresql") == (
            "CREATE TABLE t (status VARCHAR(10) DEFAULT 'new', qty INT DEFAULT 0, "
            "active BOOLEAN DEFAULT TRUE, created TIMESTAMP DEFAULT NOW())"
        )

    def test_default_before_not_null(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            default_values={"a": 1},
            not_null_columns={"a": NotNullConstraint()},
        )
        assert _sql(stmt, "postgresql") == "CREATE TABLE t (a INT DEFAULT 1 NOT NULL)"

    def test_mssql_named_default_constraint(self) -> None:
        stmt = _table(
            columns=("created", "flag"),
            column_types={"created": "DATETIME", "flag": "BIT"},
            default_values={"created": DatabaseFunction(value="NOW()"), "flag": False},
            default_value_constraint_names={"flag": "df_flag"},
        )
        assert _sql(stmt, "mssql") == (
            "CREATE TABLE t (created DATETIME CONSTRAINT DF_t_created DEFAULT GETDATE(), "
            "flag BIT CONSTRAINT df_flag DEFAULT 0)"
        )

    def test_default_skipped_for_serial_column(self) -> None:
        stmt = _table(
            columns=("id",),
            column_types={"id": "SERIAL"},
            default_values={"id": 1},
        )
        assert _sql(stmt, "postgresql", major_version=9) == "CREATE TABLE t (id SERIAL)"

    @pytest.mark.parametrize(
        ("dialect", "column_text"),
        [
            ("postgresql", "c INT GENERATED ALWAYS AS (a + 1) STORED"),
            ("oracle", "c INTEGER GENERATED ALWAYS AS (a + 1) STORED"),
            ("databricks", "c INT GENERATED ALWAYS AS (a + 1) STORED"),
        ],
    )
    def test_generated_column_expression(self, dialect: str, column_text: str) -> None:
        stmt = _table(
            columns=("c",),
            column_types={"c": "INT"},
            default_values={"c": DatabaseFunction(value="GENERATED ALWAYS AS (a + 1) STORED")},
        )
        assert _sql(stmt, dialect) == f"CREATE TABLE t ({column_text})"

    def test_generated_text_literal_stays_a_quoted_default(self) -> None:
        stmt = _table(
            columns=("note",),
            column_types={"note": "VARCHAR(40)"},
            default_values={"note": "GENERATED ALWAYS AS (a + 1) STORED"},
        )
        assert _sql(stmt, "postgresql") == (
            "CREATE TABLE t (note VARCHAR(40) DEFAULT 'GENERATED ALWAYS AS (a + 1) STORED')"
        )

    def test_sql_anywhere_compute_expression(self) -> None:
        stmt = _table(
            columns=("a", "c"),
            column_types={"a": "INT", "c": "INT"},
            default_values={"c": DatabaseFunction(value="COMPUTE (a * 2)")},
        )
        assert "c INT COMPUTE (a * 2) NULL" in _sql(stmt, "asany")

    def test_sequence_defaults(self) -> None:
        stmt = _table(
            columns=("id",),
            column_types={"id": "INT"},
            default_values={"id": SequenceNextValue(sequence_name="t_seq")},
        )
        assert "id INT DEFAULT nextval('t_seq')" in _sql(stmt, "postgresql")
        assert "id INT GENERATED BY DEFAULT AS SEQUENCE t_seq" in _sql(stmt, "hsqldb")

    def test_db2z_identity_default(self) -> None:
        stmt = _table(
            columns=("id", "owner"),
            column_types={"id": "INT", "owner": "VARCHAR(8)"},
            default_values={"id": "IDENTITY GENERATED BY DEFAULT", "owner": "CURRENT USER"},
        )
        assert _sql(stmt, "db2z") == (
            "CREATE TABLE t (id INT GENERATED BY DEFAULT AS IDENTITY, "
            "owner VARCHAR(8) DEFAULT SESSION_USER)"
        )


class TestForeignKeys:
    def _with_fk(self, **fk) -> CreateTableStatement:
        fk.setdefault("foreign_key_name", "fk_customer")
        fk.setdefault("column", "customer_id")
        return _table(
            table_name="orders",
            columns=("customer_id",),
            column_types={"customer_id": "INT"},
            foreign_keys=(ForeignKeyConstraint(**fk),),
        )

    def test_raw_reference_gets_default_schema(self) -> None:
        stmt = self._with_fk(references="customers(id)")
        assert (
            "CONSTRAINT fk_customer FOREIGN KEY (customer_id) REFERENCES app.customers(id)"
            in _sql(stmt, "postgresql", default_schema="app")
        )

    def test_qualified_reference_left_alone(self) -> None:
        stmt = self._with_fk(references="crm.customers(id)")
        assert "REFERENCES crm.customers(id)" in _sql(stmt, "postgresql", default_schema="app")

    def test_default_schema_output_disabled(self) -> None:
        stmt = self._with_fk(references="customers(id)")
        sql = _sql(stmt, "postgresql", default_schema="app", output_default_schema=False)
        assert "REFERENCES customers(id)" in sql

    def test_no_qualification_without_schema_support(self) -> None:
        stmt = self._with_fk(references="customers(id)")
        assert "REFERENCES customers(id)" in _sql(stmt, "sqlite", default_schema="main")

    def test_explicit_target(self) -> None:
        stmt = self._with_fk(
            referenced_table_schema_name="crm",
            referenced_table_name="customers",
            referenced_column_names="id, region",
            delete_cascade=True,
        )
        assert (
            "FOREIGN KEY (customer_id) REFERENCES crm.customers(id, region) ON DELETE CASCADE"
            in _sql(stmt, "postgresql")
        )

    def test_explicit_target_without_columns_references_table(self) -> None:
        stmt = self._with_fk(referenced_table_name="customers")
        sql = _sql(stmt, "postgresql")
        assert sql.endswith("FOREIGN KEY (customer_id) REFERENCES customers)")
        assert "()" not in sql

    @pytest.mark.parametrize("columns", ["", " , "])
    def test_blank_referenced_columns_omit_list(self, columns: str) -> None:
        stmt = self._with_fk(referenced_table_name="customers", referenced_column_names=columns)
        assert _sql(stmt, "oracle").endswith("REFERENCES customers)")

    def test_deferral_and_novalidate(self) -> None:
        stmt = self._with_fk(
            references="customers(id)",
            deferrable=True,
            initially_deferred=True,
            validate_foreign_key=False,
        )
        assert "REFERENCES customers(id) INITIALLY DEFERRED DEFERRABLE ENABLE NOVALIDATE" in _sql(
            stmt, "oracle"
        )
        assert "REFERENCES customers(id) INITIALLY DEFERRED DEFERRABLE)" in _sql(
            stmt, "postgresql"
        )
        assert "REFERENCES customers(id) CHECK ON COMMIT)" in _sql(stmt, "asany")
        assert _sql(stmt, "mysql").endswith("REFERENCES customers(id))")

    def test_informix_name_after_reference(self) -> None:
        stmt = self._with_fk(references="customers(id)", delete_cascade=True)
        assert (
            "FOREIGN KEY (customer_id) REFERENCES customers(id) ON DELETE CASCADE "
            "CONSTRAINT fk_customer" in _sql(stmt, "informix")
        )


class TestUniqueConstraints:
    def test_same_name_merged(self) -> None:
        stmt = _table(
            columns=("colA", "colB"),
            column_types={"colA": "INT", "colB": "INT"},
            unique_constraints=(
                UniqueConstraint(constraint_name="U1", columns=("colA",)),
                UniqueConstraint(constraint_name="U1", columns=("colB",)),
            ),
        )
        sql = _sql(stmt, "postgresql")
        assert "CONSTRAINT U1 UNIQUE (colA, colB)" in sql
        assert sql.count("UNIQUE") == 1

    def test_unnamed_first_then_named_in_first_seen_order(self) -> None:
        merged = merge_unique_constraints(
            [
                UniqueConstraint(constraint_name="b", columns=("x",)),
                UniqueConstraint(columns=("y",)),
                UniqueConstraint(constraint_name="a", columns=("z",)),
                UniqueConstraint(constraint_name="b", columns=("x", "w"), validate_unique=False),
            ]
        )
        assert [(u.constraint_name, u.columns) for u in merged] == [
            (None, ("y",)),
            ("b", ("x", "w")),
            ("a", ("z",)),
        ]
        assert merged[1].validate_unique is True

    def test_novalidate_unique(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            unique_constraints=(UniqueConstraint(columns=("a",), validate_unique=False),),
        )
        assert _sql(stmt, "oracle").endswith("UNIQUE (a) ENABLE NOVALIDATE)")


class TestTableOptions:
    def test_tablespace_keyword_per_dialect(self) -> None:
        stmt = _table(columns=("a",), column_types={"a": "INT"}, tablespace="ts1")
        assert _sql(stmt, "postgresql").endswith(") TABLESPACE ts1")
        assert _sql(stmt, "mssql").endswith(") ON ts1")
        assert _sql(stmt, "db2").endswith(") IN ts1")
        assert _sql(stmt, "mysql").endswith(")")

    def test_mysql_comments(self) -> None:
        stmt = _table(
            columns=("a",),
            column_types={"a": "INT"},
            remarks="Customer's table",
            column_remarks={"a": "Primary id"},
        )
        assert _sql(stmt, "mysql") == (
            "CREATE TABLE t (a INT NULL COMMENT 'Primary id') COMMENT='Customer''s table'"
        )
        assert "COMMENT" not in _sql(stmt, "postgresql")

    def test_oracle_row_dependencies(self) -> None:
        stmt = _table(
            columns=("a",), column_types={"a": "INT"}, tablespace="users", row_dependencies=True
        )
        assert _sql(stmt, "oracle").endswith(") TABLESPACE users ROWDEPENDENCIES")
        assert "ROWDEPENDENCIES" not in _sql(stmt, "postgresql")


def test_generic_generator_is_default() -> None:
    generator = GeneratorRegistry.get("createTable", DialectRegistry.get("postgresql"))
    assert type(generator) is CreateTableGenerator
