from __future__ import annotations

from collections.abc import Iterator, Sequence

import sqlalchemy as sa
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from pollinate.errors import TableUnavailable
from pollinate.rows import Page, to_row


def select_page(
    conn: Connection,
    table_name: str,
    limit: int,
    offset: int,
    order_by: Sequence[str] = (),
) -> Page:
    table = sa.table(table_name, *(sa.column(c) for c in order_by))
    q = sa.select(sa.literal_column("*")).select_from(table)
    if order_by:
        q = q.order_by(*(table.c[c] for c in order_by))
    q = q.limit(limit).offset(offset)
    try:
        result = conn.execute(q)
        return [to_row(m) for m in result.mappings()]
    except SQLAlchemyError as e:
        raise TableUnavailable(table_name) from e


def iter_pages(
    conn: Connection,
    table_name: str,
    page_size: int,
    order_by: Sequence[str] = (),
) -> Iterator[Page]:
    """
    Yield successive non-empty pages of `table_name`.

    Page n is fetched with LIMIT page_size OFFSET n * page_size. Iteration ends at
    the first empty page, or right after a short page since nothing can follow it.
    Raises TableUnavailable if any fetch fails.
    """
    if page_size < 1:
        raise ValueError("page_size must be a positive integer")

    page_index = 0
    while True:
        page = select_page(conn, table_name, page_size, page_index * page_size, order_by)
        if not page:
            return
        yield page
        if len(page) < page_size:
            return
        page_index += 1
