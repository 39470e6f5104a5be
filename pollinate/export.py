from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sqlalchemy.engine import Engine

from pollinate.errors import DeleteFailed, FileConflict, TableUnavailable
from pollinate.guard import apply_overwrite_policy
from pollinate.jobs import build_jobs
from pollinate.logging import get_logger
from pollinate.metadata import SeedMetadata, collect_metadata
from pollinate.settings import ExportConfig
from pollinate.tables import resolve_table_names
from pollinate.writer import write_seed


@dataclass
class ExportReport:
    # Generated type names, in export order, for registration elsewhere.
    exported: list[str] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    deleted: list[Path] = field(default_factory=list)
    conflict: FileConflict | None = None
    delete_failures: list[DeleteFailed] = field(default_factory=list)
    unavailable: list[TableUnavailable] = field(default_factory=list)
    write_failures: list[str] = field(default_factory=list)

    @property
    def conflicts(self) -> list[Path]:
        return list(self.conflict.paths) if self.conflict else []

    @property
    def ok(self) -> bool:
        return not (self.conflict or self.delete_failures or self.unavailable or self.write_failures)


def run_export(
    engine: Engine,
    config: ExportConfig,
    tables: str | None = None,
    metadata: SeedMetadata | None = None,
) -> ExportReport:
    """
    Export every requested (or discovered) table to its own seeder module.

    Per-table failures are logged and recorded on the report; they never stop the
    run. The overwrite policy is applied to all jobs before anything is written.
    """
    log = get_logger(config.silent)
    table_names = resolve_table_names(engine, tables, config.ignore_tables)
    jobs = build_jobs(config.seeds_directory, config.prefix, table_names)

    guarded = apply_overwrite_policy(jobs, overwrite=config.overwrite, silent=config.silent)
    report = ExportReport(
        deleted=guarded.deleted,
        conflict=guarded.conflict,
        delete_failures=guarded.delete_failures,
    )
    if not guarded.jobs:
        return report

    metadata = metadata or collect_metadata(engine, config.environment)

    with engine.connect() as conn:
        for job in guarded.jobs:
            try:
                type_name = write_seed(conn, job, config.seeds_namespace, config.page_size, metadata)
            except TableUnavailable as e:
                log.error("table_unavailable", table=job.table_name, error=str(e))
                report.unavailable.append(e)
                continue
            except OSError as e:
                log.error("seed_write_failed", table=job.table_name, path=str(job.path), error=str(e))
                report.write_failures.append(job.table_name)
                continue
            finally:
                # A failed statement can poison the transaction for the next table.
                if conn.in_transaction():
                    conn.rollback()

            log.info("table_seeded", table=job.table_name, path=str(job.path))
            report.exported.append(type_name)
            report.written.append(job.path)

    return report
