"""Generator contract, per-call generation context and the diagnostics sink."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from ddlforge.dialect.base import Dialect
from ddlforge.models.errors import ValidationError
from ddlforge.models.sql import SqlFragment

PRIORITY_DEFAULT = 1
PRIORITY_DATABASE = 5


@dataclass
class Diagnostics:
    """Collects warnings and notices raised while generating one statement.

    Every message is also forwarded to ``logger``.
    """

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("ddlforge.generator"))
    warnings: list[str] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    def warning(self, message: str) -> None:
        self.warnings.append(message)
        self.logger.warning(message)

    def info(self, message: str) -> None:
        self.notices.append(message)
        self.logger.info(message)


@dataclass(frozen=True)
class GenerationContext:
    """Everything a generator may consult besides the statement itself."""

    dialect: Dialect
    major_version: int | None = None
    default_schema: str | None = None
    output_default_schema: bool = True
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class SqlGenerator(ABC):
    """Turns one kind of statement into SQL for the dialects it supports.

    ``dialects`` of ``None`` marks a generic generator; a dialect-specific
    override lists the dialect names it handles and raises ``priority``.
    """

    statement_kind: ClassVar[str]
    priority: ClassVar[int] = PRIORITY_DEFAULT
    dialects: ClassVar[frozenset[str] | None] = None

    def supports(self, dialect: Dialect) -> bool:
        return self.dialects is None or dialect.name in self.dialects

    @abstractmethod
    def validate(self, statement: Any, dialect: Dialect) -> list[ValidationError]:
        """Return every problem that prevents generation (empty when valid)."""

    @abstractmethod
    def generate(self, statement: Any, context: GenerationContext) -> list[SqlFragment]:
        """Render the statement; the primary fragment comes first."""
