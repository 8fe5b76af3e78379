"""Informix CREATE TABLE generator: constraint names follow the key definition."""

from __future__ import annotations

from ddlforge.dialect.base import ConstraintNamePosition
from ddlforge.generator.base import PRIORITY_DATABASE
from ddlforge.generator.create_table import CreateTableGenerator
from ddlforge.generator.registry import GeneratorRegistry


@GeneratorRegistry.register
class InformixCreateTableGenerator(CreateTableGenerator):
    """Emits ``PRIMARY KEY (...) CONSTRAINT <name>``; everything else is generic."""

    priority = PRIORITY_DATABASE
    dialects = frozenset({"informix"})

    def _primary_key_name_position(self) -> ConstraintNamePosition:
        return ConstraintNamePosition.AFTER
