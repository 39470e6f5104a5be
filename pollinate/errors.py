from __future__ import annotations

from pathlib import Path
from typing import Iterable


class PollinateError(Exception):
    """Base class for every error the exporter raises on purpose."""


# Fatal: raised before any table is touched.


class EnvironmentUnsupported(PollinateError):
    pass


class DirectoryNotFound(PollinateError):
    def __init__(self, candidates: Iterable[Path]) -> None:
        self.candidates = list(candidates)
        listing = "".join(f"\n* {p}" for p in self.candidates)
        super().__init__(f"No valid seeder directory at:{listing}")


class DirectoryNotWritable(PollinateError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Cannot write to {path}")


# Per table: the run continues with the next table.


class TableUnavailable(PollinateError):
    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' does not exist or cannot be read. Seed not written.")


class FileConflict(PollinateError):
    def __init__(self, paths: Iterable[Path]) -> None:
        self.paths = list(paths)
        listing = "".join(f"\n* {p}" for p in self.paths)
        super().__init__(f"Cannot overwrite the following files:{listing}")


class DeleteFailed(PollinateError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"could not delete {path}")
