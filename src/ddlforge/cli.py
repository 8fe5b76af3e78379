"""Command-line SQL writer: statement file in, dialect-specific DDL script out."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ddlforge import __version__
from ddlforge.dialect.registry import DialectRegistry, UnsupportedDialectError
from ddlforge.generator.pipeline import GenerationPipeline, GenerationResult
from ddlforge.models.errors import StatementValidationError, ValidationError
from ddlforge.parser.loader import StatementLoader, YAMLSafetyError
from ddlforge.parser.statements import StatementReader
from ddlforge.settings import Settings

logger = logging.getLogger("ddlforge.cli")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddlforge",
        description="Generate dialect-specific CREATE TABLE SQL from a statement file.",
    )
    parser.add_argument("input", help="YAML statement file")
    parser.add_argument(
        "-d", "--dialect",
        default=settings.default_dialect,
        help=f"Target dialect (one of: {', '.join(DialectRegistry.available())})",
    )
    parser.add_argument("-o", "--output", default=settings.output_file,
                        help="Output SQL file (overwritten; stdout when omitted)")
    parser.add_argument("--db-version", type=int, default=settings.database_major_version,
                        help="Database major version to generate for")
    parser.add_argument("--default-schema", default=settings.default_schema_name,
                        help="Schema used to qualify unqualified foreign key references")
    parser.add_argument("--no-check", action="store_true",
                        help="Skip the sqlglot syntax check")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def write_script(results: Sequence[GenerationResult], out: TextIO) -> None:
    """Write every fragment terminated by ``;`` under a short header."""
    dialect = results[0].dialect if results else "unknown"
    out.write(f"-- ddlforge {__version__} SQL script for {dialect}\n")
    for result in results:
        out.write("\n")
        for fragment in result.fragments:
            out.write(f"{fragment.sql};\n")


def _report(errors: Sequence[ValidationError]) -> None:
    for error in errors:
        location = ""
        if error.span is not None:
            location = f"{error.span.file}:{error.span.line}:{error.span.column}: "
        elif error.path:
            location = f"{error.path}: "
        print(f"{location}[{error.code}] {error.message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    args = build_parser(settings).parse_args(argv)
    input_path = Path(args.input)

    try:
        raw, source_map = StatementLoader().load(input_path)
    except (OSError, YAMLSafetyError) as exc:
        print(f"Cannot load {input_path}: {exc}", file=sys.stderr)
        return 1

    statements, result = StatementReader().read(raw, source_map)
    if not result.valid:
        _report(result.errors)
        return 1

    pipeline = GenerationPipeline(
        default_schema=args.default_schema,
        output_default_schema=settings.output_default_schema,
        check_sql=settings.check_sql and not args.no_check,
        probe_timeout=settings.version_probe_timeout_seconds,
    )
    try:
        results = pipeline.generate_all(statements, args.dialect, major_version=args.db_version)
    except UnsupportedDialectError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except StatementValidationError as exc:
        _report(exc.errors)
        return 1

    for generated in results:
        for warning in generated.warnings:
            logger.warning(warning)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as handle:
            write_script(results, handle)
        logger.info("Output SQL file: %s", output_path.resolve())
    else:
        write_script(results, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
