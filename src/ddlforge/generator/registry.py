"""Generator registry — picks the most specific generator for a statement kind and dialect."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect
from ddlforge.generator.base import SqlGenerator


class NoGeneratorError(Exception):
    """Raised when no registered generator handles a statement kind for a dialect."""

    def __init__(self, kind: str, dialect_name: str) -> None:
        self.kind = kind
        self.dialect_name = dialect_name
        super().__init__(f"No SQL generator for '{kind}' on dialect '{dialect_name}'")


class GeneratorRegistry:
    """Registry of generator classes in registration order."""

    _generators: list[type[SqlGenerator]] = []

    @classmethod
    def register(cls, generator_class: type[SqlGenerator]) -> type[SqlGenerator]:
        """Register a generator class. Can be used as a decorator."""
        if generator_class not in cls._generators:
            cls._generators.append(generator_class)
        return generator_class

    @classmethod
    def get(cls, kind: str, dialect: Dialect) -> SqlGenerator:
        """Return the highest-priority generator for ``kind`` that supports ``dialect``.

        Equal priorities resolve to the generator registered first.
        """
        best: SqlGenerator | None = None
        for generator_class in cls._generators:
            if generator_class.statement_kind != kind:
                continue
            generator = generator_class()
            if not generator.supports(dialect):
                continue
            if best is None or generator.priority > best.priority:
                best = generator
        if best is None:
            raise NoGeneratorError(kind, dialect.name)
        return best

    @classmethod
    def available(cls, kind: str | None = None) -> list[type[SqlGenerator]]:
        """List registered generator classes, optionally for one statement kind."""
        return [g for g in cls._generators if kind is None or g.statement_kind == kind]

    @classmethod
    def reset(cls) -> None:
        """Clear all registered generators (for testing)."""
        cls._generators.clear()
