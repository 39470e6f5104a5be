from __future__ import annotations

import os
import sys
from pathlib import Path

from pollinate.errors import DirectoryNotFound, DirectoryNotWritable, EnvironmentUnsupported


MIN_PYTHON = (3, 11)

# Checked in order under the project root; the first existing directory wins.
SEEDS_DIRECTORY_CANDIDATES = [
    Path("database") / "seeders",
    Path("database") / "seeds",
    Path("db") / "seeders",
    Path("db") / "seeds",
]


def check_python_version(version: tuple[int, ...] | None = None) -> None:
    version = version or sys.version_info[:2]
    if tuple(version[:2]) < MIN_PYTHON:
        raise EnvironmentUnsupported(f"Python must be {MIN_PYTHON[0]}.{MIN_PYTHON[1]} or higher")


def namespace_for(directory: Path, project_root: Path) -> str:
    try:
        relative = directory.resolve().relative_to(project_root.resolve())
    except ValueError:
        return directory.name
    return ".".join(relative.parts) or directory.name


def find_seeds_directory(project_root: Path, seeds_dir: Path | None = None) -> tuple[Path, str]:
    """
    Return (directory, dotted module namespace) for generated seeders.

    An explicit `seeds_dir` is used as-is (relative paths resolve against the
    project root); otherwise the conventional locations are searched.
    """
    if seeds_dir is not None:
        directory = seeds_dir if seeds_dir.is_absolute() else project_root / seeds_dir
        if not directory.is_dir():
            raise DirectoryNotFound([directory])
        return directory, namespace_for(directory, project_root)

    candidates = [project_root / c for c in SEEDS_DIRECTORY_CANDIDATES]
    for directory in candidates:
        if directory.is_dir():
            return directory, namespace_for(directory, project_root)
    raise DirectoryNotFound(candidates)


def check_writable(directory: Path) -> None:
    if not os.access(directory, os.W_OK):
        raise DirectoryNotWritable(directory)


def prepare_seeds_directory(project_root: Path, seeds_dir: Path | None = None) -> tuple[Path, str]:
    directory, namespace = find_seeds_directory(project_root, seeds_dir)
    check_writable(directory)
    return directory, namespace
