"""Shared test fixtures for ddlforge."""

from __future__ import annotations

import pytest

from ddlforge.generator import GenerationPipeline, GeneratorRegistry
from ddlforge.models.statement import (
    AutoIncrementConstraint,
    CreateTableStatement,
    PrimaryKeyConstraint,
)
from ddlforge.parser.loader import StatementLoader
from ddlforge.parser.statements import StatementReader


@pytest.fixture
def loader() -> StatementLoader:
    return StatementLoader()


@pytest.fixture
def reader() -> StatementReader:
    return StatementReader()


@pytest.fixture
def pipeline() -> GenerationPipeline:
    """Pipeline without the sqlglot check, so assertions see only generated SQL."""
    return GenerationPipeline(check_sql=False)


@pytest.fixture
def orders_table() -> CreateTableStatement:
    """Auto-increment single-column primary key plus a nullable text column."""
    return CreateTableStatement(
        table_name="orders",
        columns=("id", "note"),
        column_types={"id": "INT", "note": "VARCHAR(200)"},
        auto_increment_constraints=(AutoIncrementConstraint(column_name="id"),),
        primary_key=PrimaryKeyConstraint(columns=("id",)),
    )


@pytest.fixture
def restore_generators():
    """Snapshot the generator registry and restore it after the test."""
    saved = list(GeneratorRegistry._generators)
    yield
    GeneratorRegistry._generators[:] = saved


SAMPLE_STATEMENTS_YAML = """\
statements:
  - createTable:
      tableName: customers
      columns: [id, name, active]
      columnTypes:
        id: INT
        name: VARCHAR(50)
        active: BOOLEAN
      defaultValues:
        active: true
      notNullColumns:
        name: {}
      autoIncrementConstraints:
        - columnName: id
      primaryKey:
        columns: [id]
  - createTable:
      tableName: orders
      columns: [id, customer_id]
      columnTypes:
        id: BIGINT
        customer_id: INT
      primaryKey:
        columns: [id]
      foreignKeys:
        - foreignKeyName: fk_orders_customer
          column: customer_id
          references: customers(id)
"""


@pytest.fixture
def sample_statements_yaml() -> str:
    return SAMPLE_STATEMENTS_YAML
