from __future__ import annotations

import pytest
import sqlalchemy as sa


@pytest.fixture()
def select_counter(source_engine):
    statements: list[str] = []

    def _count(conn, cursor, statement, parameters, context, executemany) -> None:
        if statement.lstrip().upper().startswith("SELECT *"):
            statements.append(statement)

    sa.event.listen(source_engine, "before_cursor_execute", _count)
    yield statements
    sa.event.remove(source_engine, "before_cursor_execute", _count)


def test_seven_rows_page_size_five_gives_two_pages(source_engine, select_counter) -> None:
    from pollinate.pager import iter_pages

    with source_engine.connect() as conn:
        pages = list(iter_pages(conn, "users", 5, order_by=["id"]))

    assert [len(p) for p in pages] == [5, 2]
    assert [r["id"].text for p in pages for r in p] == [str(i) for i in range(1, 8)]
    # The short second page ends pagination without another query.
    assert len(select_counter) == 2


def test_exact_multiple_stops_at_first_empty_page(source_engine, select_counter) -> None:
    from pollinate.pager import iter_pages

    with source_engine.begin() as conn:
        conn.execute(sa.text("DELETE FROM users WHERE id > 6"))
    with source_engine.connect() as conn:
        pages = list(iter_pages(conn, "users", 3))

    assert [len(p) for p in pages] == [3, 3]
    assert len(select_counter) == 3


def test_page_count_is_ceil_of_rows_over_page_size(source_engine) -> None:
    from pollinate.pager import iter_pages

    with source_engine.connect() as conn:
        for page_size, expected in [(1, 7), (2, 4), (7, 1), (100, 1)]:
            pages = list(iter_pages(conn, "users", page_size, order_by=["id"]))
            assert len(pages) == expected
            assert all(pages)
            assert sum(len(p) for p in pages) == 7


def test_empty_table_yields_no_pages(source_engine) -> None:
    from pollinate.pager import iter_pages

    with source_engine.connect() as conn:
        assert list(iter_pages(conn, "tags", 5)) == []


def test_missing_table_raises_table_unavailable(source_engine) -> None:
    from pollinate.errors import TableUnavailable
    from pollinate.pager import iter_pages

    with source_engine.connect() as conn:
        with pytest.raises(TableUnavailable, match="'nope'") as exc_info:
            next(iter_pages(conn, "nope", 5))
    assert exc_info.value.table_name == "nope"


def test_pages_keep_source_column_order(source_engine) -> None:
    from pollinate.pager import iter_pages

    with source_engine.connect() as conn:
        first = next(iter_pages(conn, "users", 5))
    assert list(first[0]) == ["id", "name", "email", "zip", "score", "deleted_at"]


def test_rejects_non_positive_page_size(source_engine) -> None:
    from pollinate.pager import iter_pages

    with source_engine.connect() as conn:
        with pytest.raises(ValueError):
            next(iter_pages(conn, "users", 0))
