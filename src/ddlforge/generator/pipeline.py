"""Orchestrates generation: Statement → Validation → Generator selection → SQL → Check."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ddlforge.dialect.base import Dialect
from ddlforge.dialect.registry import DialectRegistry
from ddlforge.dialect.version import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    VersionProbe,
    resolve_major_version,
)
from ddlforge.generator.base import Diagnostics, GenerationContext
from ddlforge.generator.registry import GeneratorRegistry
from ddlforge.generator.sql_check import check_sql
from ddlforge.models.errors import StatementValidationError
from ddlforge.models.sql import SqlFragment
from ddlforge.models.statement import CreateTableStatement

logger = logging.getLogger("ddlforge.generator")


@dataclass
class GenerationResult:
    """The result of generating SQL for one statement."""

    fragments: list[SqlFragment]
    dialect: str
    major_version: int | None = None
    warnings: list[str] = field(default_factory=list)
    sql_valid: bool = True

    @property
    def sql(self) -> list[str]:
        return [f.sql for f in self.fragments]


class GenerationPipeline:
    """Orchestrates: Statement → Validation → Generator → SQL fragments."""

    def __init__(
        self,
        default_schema: str | None = None,
        output_default_schema: bool = True,
        check_sql: bool = True,
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
    ) -> None:
        self._default_schema = default_schema
        self._output_default_schema = output_default_schema
        self._check_sql = check_sql
        self._probe_timeout = probe_timeout

    def generate(
        self,
        statement: CreateTableStatement,
        dialect: str | Dialect,
        major_version: int | None = None,
        version_probe: VersionProbe | None = None,
    ) -> GenerationResult:
        """Generate SQL for one statement.

        Raises ``StatementValidationError`` with every problem found when the
        statement is not valid for the dialect. Warnings never block.
        """
        if statement is None:
            raise TypeError("statement must not be None")
        if dialect is None:
            raise TypeError("dialect must not be None")
        if isinstance(dialect, str):
            dialect = DialectRegistry.get(dialect)

        # Phase 1: generator selection + validation
        generator = GeneratorRegistry.get(statement.kind, dialect)
        errors = generator.validate(statement, dialect)
        if errors:
            raise StatementValidationError(errors)

        # Phase 2: version resolution (best effort)
        version = resolve_major_version(
            dialect, explicit=major_version, probe=version_probe, timeout=self._probe_timeout
        )

        # Phase 3: SQL generation
        diagnostics = Diagnostics(logger=logger)
        context = GenerationContext(
            dialect=dialect,
            major_version=version,
            default_schema=self._default_schema,
            output_default_schema=self._output_default_schema,
            diagnostics=diagnostics,
        )
        fragments = generator.generate(statement, context)

        # Phase 4: syntax check of the primary statement (non-blocking)
        warnings = list(diagnostics.warnings)
        sql_valid = True
        if self._check_sql and fragments:
            check_errors = check_sql(fragments[0].sql, dialect.name)
            sql_valid = len(check_errors) == 0
            warnings.extend(f"SQL validation: {e}" for e in check_errors)

        return GenerationResult(
            fragments=fragments,
            dialect=dialect.name,
            major_version=version,
            warnings=warnings,
            sql_valid=sql_valid,
        )

    def generate_all(
        self,
        statements: Iterable[CreateTableStatement],
        dialect: str | Dialect,
        major_version: int | None = None,
        version_probe: VersionProbe | None = None,
    ) -> list[GenerationResult]:
        """Generate each statement independently, in the given order.

        The version is resolved once for the whole batch.
        """
        if isinstance(dialect, str):
            dialect = DialectRegistry.get(dialect)
        version = resolve_major_version(
            dialect, explicit=major_version, probe=version_probe, timeout=self._probe_timeout
        )
        return [self.generate(s, dialect, major_version=version) for s in statements]
