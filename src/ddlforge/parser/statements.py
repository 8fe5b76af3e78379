"""Turns a loaded statement document into validated statement models."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ddlforge.models.errors import ValidationError, ValidationResult
from ddlforge.models.statement import CreateTableStatement
from ddlforge.parser.loader import SourceMap

_SUPPORTED_KINDS = ("createTable",)


class StatementReader:
    """Builds ``CreateTableStatement`` objects from a raw YAML document.

    Accepted shapes::

        statements:
          - createTable: {...}

    or a single ``createTable: {...}`` mapping at the top level.
    """

    def read(
        self,
        raw: dict[str, Any],
        source_map: SourceMap | None = None,
    ) -> tuple[list[CreateTableStatement], ValidationResult]:
        """Returns (statements, validation_result); statements with errors are skipped."""
        source_map = source_map or SourceMap()
        errors: list[ValidationError] = []
        statements: list[CreateTableStatement] = []

        if "statements" in raw:
            entries = raw["statements"]
            base_path = "statements"
        elif "createTable" in raw:
            entries = [raw]
            base_path = ""
        else:
            entries = []
            base_path = "statements"

        if not isinstance(entries, list):
            errors.append(
                ValidationError(
                    code="STATEMENT_PARSE_ERROR",
                    message="'statements' must be a YAML list",
                    path="statements",
                    span=source_map.get("statements"),
                )
            )
            entries = []

        for i, entry in enumerate(entries):
            entry_path = f"{base_path}[{i}]" if base_path else ""
            if not isinstance(entry, dict) or len(entry) != 1:
                errors.append(
                    ValidationError(
                        code="STATEMENT_PARSE_ERROR",
                        message="Each statement must be a mapping with exactly one kind key",
                        path=entry_path or None,
                        span=source_map.nearest(entry_path),
                    )
                )
                continue
            kind, body = next(iter(entry.items()))
            kind_path = f"{entry_path}.{kind}" if entry_path else kind
            if kind not in _SUPPORTED_KINDS:
                errors.append(
                    ValidationError(
                        code="UNSUPPORTED_STATEMENT",
                        message=f"Unsupported statement kind '{kind}'",
                        path=kind_path,
                        span=source_map.nearest(kind_path),
                        suggestions=list(_SUPPORTED_KINDS),
                    )
                )
                continue
            try:
                statements.append(CreateTableStatement.model_validate(body))
            except PydanticValidationError as exc:
                for detail in exc.errors():
                    field_path = _loc_to_path(detail["loc"])
                    path = f"{kind_path}.{field_path}" if field_path else kind_path
                    errors.append(
                        ValidationError(
                            code="STATEMENT_PARSE_ERROR",
                            message=f"{field_path or kind}: {detail['msg']}",
                            path=path,
                            span=source_map.nearest(path),
                        )
                    )

        return statements, ValidationResult(valid=not errors, errors=errors)


def _loc_to_path(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path
