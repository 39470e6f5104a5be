from __future__ import annotations

from sqlalchemy.engine import Connection

from pollinate.db import primary_key_columns
from pollinate.formatter import format_page
from pollinate.jobs import ExportJob
from pollinate.metadata import SeedMetadata
from pollinate.pager import iter_pages
from pollinate.templates import insert_block_foot, insert_block_head, seeder_file_foot, seeder_file_head


def write_seed(
    conn: Connection,
    job: ExportJob,
    namespace: str,
    page_size: int,
    metadata: SeedMetadata,
) -> str:
    """
    Write the seeder module for one table and return its type name.

    The file is streamed page by page; if anything fails along the way the partial
    file is removed before the exception propagates.
    """
    # Stable page boundaries where the table has a primary key.
    order_by = primary_key_columns(conn, job.table_name)
    head = seeder_file_head(job.table_name, job.type_name, namespace, metadata)
    foot = seeder_file_foot()

    try:
        with job.path.open("a", encoding="utf-8") as fp:
            fp.write(head)
            for page in iter_pages(conn, job.table_name, page_size, order_by):
                if page:
                    fp.write(insert_block_head(job.table_name) + format_page(page) + insert_block_foot())
            fp.write(foot)
    except BaseException:
        job.path.unlink(missing_ok=True)
        raise

    return job.type_name
