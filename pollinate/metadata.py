from __future__ import annotations

import getpass
import socket
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy.engine import Engine

from pollinate.db import database_name


@dataclass(frozen=True)
class SeedMetadata:
    database: str
    user: str
    host: str
    created_at: datetime
    environment: str

    @property
    def date(self) -> str:
        return self.created_at.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()


def current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # No login name and no passwd entry, e.g. an arbitrary container uid.
        return ""


def collect_metadata(engine: Engine, environment: str, now: datetime | None = None) -> SeedMetadata:
    return SeedMetadata(
        database=database_name(engine),
        user=current_user(),
        host=socket.gethostname(),
        created_at=now or datetime.now(tz=UTC).astimezone(),
        environment=environment,
    )
