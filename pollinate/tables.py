from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.engine import Engine

from pollinate.db import list_table_names


def parse_table_list(raw: str) -> list[str]:
    """
    Split a comma-separated table list.

    Whitespace around names is dropped, empty entries are skipped and repeated
    names keep only their first position, so every table maps to exactly one job.
    """
    names = [n.strip() for n in raw.split(",")]
    return list(dict.fromkeys(n for n in names if n))


def filter_ignored(table_names: Iterable[str], ignore_tables: Iterable[str]) -> list[str]:
    ignored = set(ignore_tables)
    return [t for t in table_names if t not in ignored]


def discover_tables(engine: Engine, ignore_tables: Iterable[str]) -> list[str]:
    return filter_ignored(list_table_names(engine), ignore_tables)


def resolve_table_names(engine: Engine, explicit: str | None, ignore_tables: Iterable[str]) -> list[str]:
    # Explicitly requested tables bypass the denylist.
    if explicit:
        return parse_table_list(explicit)
    return discover_tables(engine, ignore_tables)
