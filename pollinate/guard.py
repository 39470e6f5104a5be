from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pollinate.errors import DeleteFailed, FileConflict
from pollinate.jobs import ExportJob
from pollinate.logging import get_logger


@dataclass
class GuardOutcome:
    jobs: list[ExportJob] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    delete_failures: list[DeleteFailed] = field(default_factory=list)
    conflict: FileConflict | None = None


def delete_existing(jobs: Iterable[ExportJob], silent: bool = False) -> GuardOutcome:
    """Overwrite mode: remove every target file that already exists."""
    log = get_logger(silent)
    outcome = GuardOutcome()
    for job in jobs:
        if job.path.exists():
            try:
                job.path.unlink()
            except OSError as e:
                err = DeleteFailed(job.path)
                log.error("seed_file_delete_failed", path=str(job.path), table=job.table_name, error=str(e))
                outcome.delete_failures.append(err)
                continue
            log.info("seed_file_deleted", path=str(job.path))
            outcome.deleted.append(job.path)
        outcome.jobs.append(job)
    return outcome


def block_existing(jobs: Iterable[ExportJob], silent: bool = False) -> GuardOutcome:
    """Safe mode: skip tables whose target file exists and report them together."""
    log = get_logger(silent)
    outcome = GuardOutcome()
    blocked: list[Path] = []
    for job in jobs:
        if job.path.exists():
            blocked.append(job.path)
            continue
        outcome.jobs.append(job)

    if blocked:
        outcome.conflict = FileConflict(blocked)
        log.error(
            "seed_files_exist",
            message=str(outcome.conflict),
            paths=[str(p) for p in blocked],
            hint="You can force overwrite by passing the --overwrite option.",
        )
    return outcome


def apply_overwrite_policy(jobs: Iterable[ExportJob], overwrite: bool, silent: bool = False) -> GuardOutcome:
    if overwrite:
        return delete_existing(jobs, silent=silent)
    return block_existing(jobs, silent=silent)
