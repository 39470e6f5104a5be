from __future__ import annotations

import re
from collections.abc import Iterable

from pollinate.rows import Row, Value, ValueKind


_ESCAPE_TABLE = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\0": "\\x00",
    }
)

# Anything here could end a comment line or make the module uncompilable.
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def indent(tab_stops: int) -> str:
    """Four spaces per tab stop."""
    return " " * (tab_stops * 4)


def quote(text: str) -> str:
    return "'" + text.translate(_ESCAPE_TABLE) + "'"


def one_line(text: str) -> str:
    """Control characters become spaces, so `text` can sit inside a `#` comment."""
    return _CONTROL_RE.sub(" ", text)


def format_value(value: Value) -> str:
    if value.kind is ValueKind.NULL:
        return "None"
    if value.kind is ValueKind.NUMBER:
        return value.text
    return quote(value.text)


def format_row(row: Row) -> str:
    fields = "".join(f"{indent(4)}{quote(column)}: {format_value(value)},\n" for column, value in row.items())
    return f"{indent(3)}{{\n{fields}{indent(3)}}},\n"


def format_page(page: Iterable[Row]) -> str:
    """
    Render a page as the body of a list literal: one dict per row, fields in
    source column order.
    """
    return "".join(format_row(row) for row in page)
