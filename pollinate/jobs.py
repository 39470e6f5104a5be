from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from pollinate.logging import logger


_WORD_SPLIT_RE = re.compile(r"[\W_]+")


@dataclass(frozen=True)
class ExportJob:
    table_name: str
    path: Path
    type_name: str


def studly(table_name: str) -> str:
    """
    "user_roles" -> "UserRoles". Only the first letter of each word changes case.
    """
    return "".join(w[:1].upper() + w[1:] for w in _WORD_SPLIT_RE.split(table_name) if w)


def type_name_for(prefix: str, table_name: str) -> str:
    return f"{prefix}_{studly(table_name)}"


def build_job(seeds_directory: Path, prefix: str, table_name: str) -> ExportJob:
    type_name = type_name_for(prefix, table_name)
    return ExportJob(table_name=table_name, path=seeds_directory / f"{type_name}.py", type_name=type_name)


def build_jobs(seeds_directory: Path, prefix: str, table_names: Iterable[str]) -> list[ExportJob]:
    jobs: list[ExportJob] = []
    claimed: dict[Path, str] = {}
    for table_name in table_names:
        job = build_job(seeds_directory, prefix, table_name)
        # "user_roles" and "UserRoles" would share a file; first one wins.
        if job.path in claimed:
            logger.warning(
                "seed_file_name_collision",
                table=table_name,
                kept_table=claimed[job.path],
                path=str(job.path),
            )
            continue
        claimed[job.path] = table_name
        jobs.append(job)
    return jobs
