from __future__ import annotations

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest
import sqlalchemy as sa
import structlog


# Ensure the repo root is importable (so `import pollinate` works without an install).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


USERS_DDL = (
    "CREATE TABLE users ("
    "id INTEGER PRIMARY KEY, name TEXT NOT NULL, email TEXT, zip TEXT, score REAL, deleted_at TEXT)"
)
USERS = [
    {"id": 1, "name": "Ada", "email": "ada@example.com", "zip": "02134", "score": 1.5, "deleted_at": None},
    {"id": 2, "name": "O'Brien", "email": "ob@example.com", "zip": "10001", "score": 2.0, "deleted_at": None},
    {"id": 3, "name": "back\\slash", "email": None, "zip": None, "score": None, "deleted_at": None},
    {"id": 4, "name": "Line\nBreak", "email": "lb@example.com", "zip": "94110", "score": 0.25, "deleted_at": None},
    {"id": 5, "name": "Grace", "email": "grace@example.com", "zip": "20500", "score": 10.0, "deleted_at": None},
    {"id": 6, "name": "Linus", "email": "linus@example.com", "zip": "97201", "score": -3.5, "deleted_at": None},
    {
        "id": 7,
        "name": 'Quote "double"',
        "email": "q@example.com",
        "zip": "60601",
        "score": 42.0,
        "deleted_at": "2026-01-01 00:00:00",
    },
]


def create_schema(conn: sa.Connection) -> None:
    conn.execute(sa.text(USERS_DDL))
    conn.execute(sa.text("CREATE TABLE orders (id INTEGER PRIMARY KEY, user_id INTEGER, total NUMERIC)"))
    conn.execute(sa.text("CREATE TABLE tags (id INTEGER PRIMARY KEY, label TEXT)"))
    conn.execute(sa.text("CREATE TABLE jobs (id INTEGER PRIMARY KEY, payload TEXT)"))


@pytest.fixture(autouse=True)
def _reset_structlog():
    # The CLI configures structlog globally; keep tests independent of each other.
    yield
    structlog.reset_defaults()


@pytest.fixture()
def source_engine(tmp_path: Path):
    engine = sa.create_engine(f"sqlite:///{tmp_path / 'source.db'}")
    with engine.begin() as conn:
        create_schema(conn)
        conn.execute(
            sa.text(
                "INSERT INTO users (id, name, email, zip, score, deleted_at) "
                "VALUES (:id, :name, :email, :zip, :score, :deleted_at)"
            ),
            USERS,
        )
        conn.execute(sa.text("INSERT INTO orders (id, user_id, total) VALUES (1, 1, 19), (2, 2, 5)"))
        conn.execute(sa.text("INSERT INTO jobs (id, payload) VALUES (1, 'queued')"))
    yield engine
    engine.dispose()


@pytest.fixture()
def target_engine(tmp_path: Path):
    engine = sa.create_engine(f"sqlite:///{tmp_path / 'target.db'}")
    with engine.begin() as conn:
        create_schema(conn)
    yield engine
    engine.dispose()


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture()
def seeds_dir(project_root: Path) -> Path:
    d = project_root / "database" / "seeders"
    d.mkdir(parents=True)
    return d


@pytest.fixture()
def fixed_metadata():
    from pollinate.metadata import SeedMetadata

    return SeedMetadata(
        database="source",
        user="tester",
        host="testhost",
        created_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        environment="testing",
    )


@pytest.fixture()
def export_config(seeds_dir: Path):
    from pollinate.settings import ExportConfig

    return ExportConfig(seeds_directory=seeds_dir, seeds_namespace="database.seeders")
