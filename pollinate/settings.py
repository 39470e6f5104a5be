from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PREFIX = "pollinate"
DEFAULT_PAGE_SIZE = 5

# Tables that hold framework/queue/auth state rather than seedable data.
DEFAULT_IGNORE_TABLES = [
    "jobs",
    "failed_jobs",
    "oauth_access_tokens",
    "oauth_auth_codes",
    "oauth_clients",
    "oauth_personal_access_clients",
    "oauth_refresh_tokens",
    "password_resets",
    "personal_access_tokens",
    "alembic_version",
]


class PollinateSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="POLLINATE_", extra="forbid")

    database_url: str = "sqlite:///database.sqlite"
    project_root: Path = Path(".")
    seeds_dir: Path | None = None

    prefix: str = DEFAULT_PREFIX
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    overwrite: bool = False
    silent: bool = False

    environment: str = "local"
    ignore_tables: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_TABLES))

    log_level: str = "info"
    log_format: str = "console"


SETTINGS = PollinateSettings()


@dataclass(frozen=True)
class ExportConfig:
    """
    Everything one export run needs, resolved up front.

    Built from `PollinateSettings` plus CLI overrides and passed explicitly into the
    pipeline; nothing downstream reads process-wide state.
    """

    seeds_directory: Path
    seeds_namespace: str
    prefix: str = DEFAULT_PREFIX
    page_size: int = DEFAULT_PAGE_SIZE
    overwrite: bool = False
    silent: bool = False
    environment: str = "local"
    ignore_tables: tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_IGNORE_TABLES))

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be a positive integer")
        if not self.prefix.isidentifier():
            raise ValueError(f"prefix must be a valid Python identifier, got {self.prefix!r}")
