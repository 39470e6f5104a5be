from __future__ import annotations

from pathlib import Path

import sqlalchemy as sa
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import ArgumentError, NoSuchModuleError, SQLAlchemyError
from sqlalchemy.pool import NullPool

from pollinate.errors import EnvironmentUnsupported, TableUnavailable


def create_engine(database_url: str) -> Engine:
    """
    Build the read-side engine. Driver problems surface here, before any work,
    because SQLAlchemy imports the DBAPI module while creating the engine.
    """
    try:
        # One connection per run; pooling buys nothing for a CLI.
        return sa.create_engine(database_url, poolclass=NullPool)
    except NoSuchModuleError as e:
        raise EnvironmentUnsupported(f"No SQLAlchemy dialect for database url: {e}") from e
    except ImportError as e:
        raise EnvironmentUnsupported(f"The database driver must be installed: {e}") from e
    except ArgumentError as e:
        raise EnvironmentUnsupported(f"Invalid database url: {e}") from e


def list_table_names(engine: Engine) -> list[str]:
    return sa.inspect(engine).get_table_names()


def primary_key_columns(conn: Connection, table_name: str) -> list[str]:
    try:
        pk = sa.inspect(conn).get_pk_constraint(table_name)
    except SQLAlchemyError as e:
        raise TableUnavailable(table_name) from e
    return list(pk.get("constrained_columns") or [])


def database_name(engine: Engine) -> str:
    name = engine.url.database
    if engine.dialect.name == "sqlite":
        # File path (or nothing for in-memory); the file stem reads like a schema name.
        return Path(name).stem if name and name != ":memory:" else "memory"
    return name or ""
