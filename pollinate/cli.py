from __future__ import annotations

import argparse
import math
import os
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from pollinate.db import create_engine
from pollinate.errors import PollinateError
from pollinate.export import run_export
from pollinate.logging import configure_logging, logger
from pollinate.preflight import check_python_version, prepare_seeds_directory
from pollinate.settings import SETTINGS, ExportConfig
from pollinate.tables import discover_tables


DESCRIPTION = """Create seed files from the database.
Accepts an optional comma-separated list of tables to seed.
If no tables list is provided, all tables are seeded."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pollinate", description=DESCRIPTION)
    parser.add_argument("tables", nargs="?", default=None, help="Comma-separated list of tables to seed.")
    parser.add_argument("--prefix", default=SETTINGS.prefix, help="Prefix to file and class names.")
    parser.add_argument("--pagesize", default=None, help="Number of records per insert.")
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=SETTINGS.overwrite,
        help="Overwrite existing seeder files of the same name.",
    )
    parser.add_argument("--silent", action="store_true", default=SETTINGS.silent, help="Suppress non-error output.")
    parser.add_argument("--show-tables", action="store_true", help="Show tables that can be seeded.")
    parser.add_argument(
        "--show-ignored",
        action="store_true",
        help="Show tables that will be ignored unless explicitly requested.",
    )
    parser.add_argument("--database-url", default=os.getenv("DATABASE_URL") or SETTINGS.database_url)
    parser.add_argument("--project-root", type=Path, default=SETTINGS.project_root)
    parser.add_argument("--seeds-dir", type=Path, default=SETTINGS.seeds_dir)
    parser.add_argument("--env", default=SETTINGS.environment, help="Environment name recorded in each seed file.")
    return parser


def parse_page_size(raw: str | None, default: int = SETTINGS.page_size) -> int:
    """Numeric values are floored; anything else, or less than one, means the default."""
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or value < 1:
        return default
    return math.floor(value)


def show_listing(title: str, names: list[str]) -> None:
    print(title)
    for name in names:
        print(f"* {name}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("error" if args.silent else SETTINGS.log_level, SETTINGS.log_format)
    ignore_tables = list(SETTINGS.ignore_tables)

    try:
        check_python_version()
        engine = create_engine(args.database_url)
    except PollinateError as e:
        logger.error("preflight_failed", error=str(e))
        return 1

    try:
        return _run(args, engine, ignore_tables)
    except SQLAlchemyError as e:
        logger.error("database_unavailable", error=str(e))
        return 1
    finally:
        engine.dispose()


def _run(args: argparse.Namespace, engine: Engine, ignore_tables: list[str]) -> int:
    if args.show_tables or args.show_ignored:
        if args.show_tables:
            show_listing("Tables:", discover_tables(engine, ignore_tables))
        if args.show_ignored:
            show_listing("Ignored tables:", ignore_tables)
        return 0

    try:
        seeds_directory, seeds_namespace = prepare_seeds_directory(args.project_root, args.seeds_dir)
        config = ExportConfig(
            seeds_directory=seeds_directory,
            seeds_namespace=seeds_namespace,
            prefix=args.prefix,
            page_size=parse_page_size(args.pagesize),
            overwrite=bool(args.overwrite),
            silent=bool(args.silent),
            environment=args.env,
            ignore_tables=tuple(ignore_tables),
        )
    except (PollinateError, ValueError) as e:
        logger.error("preflight_failed", error=str(e))
        return 1

    report = run_export(engine, config, tables=args.tables)

    if not config.silent and report.exported:
        print("\nAdd these to your seeder registry:")
        for type_name in report.exported:
            print(f"{type_name},")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
