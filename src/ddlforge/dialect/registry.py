"""Dialect plugin registry — discover and register dialect implementations."""

from __future__ import annotations

from ddlforge.dialect.base import Dialect


class UnsupportedDialectError(Exception):
    """Raised when a requested dialect is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(f"Unsupported dialect '{name}'. Available: {', '.join(available)}")


class DialectRegistry:
    """Registry for DDL dialect plugins, keyed by short name."""

    _dialects: dict[str, type[Dialect]] = {}
    _aliases: dict[str, str] = {}

    @classmethod
    def register(cls, dialect_class: type[Dialect]) -> type[Dialect]:
        """Register a dialect class. Can be used as a decorator."""
        # Instantiate to read the name property
        instance = dialect_class()
        cls._dialects[instance.name] = dialect_class
        for alias in dialect_class.aliases:
            cls._aliases[alias] = instance.name
        return dialect_class

    @classmethod
    def get(cls, name: str) -> Dialect:
        """Get an instance of the named dialect (short name or alias, case-insensitive)."""
        key = name.strip().lower()
        key = cls._aliases.get(key, key)
        if key not in cls._dialects:
            raise UnsupportedDialectError(name, available=cls.available())
        return cls._dialects[key]()

    @classmethod
    def available(cls) -> list[str]:
        """List registered dialect names."""
        return sorted(cls._dialects.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered dialects (for testing)."""
        cls._dialects.clear()
        cls._aliases.clear()
