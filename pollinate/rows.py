from __future__ import annotations

import enum
import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


# Only literals that are also valid Python number literals; "0123" stays text.
_NUMERIC_RE = re.compile(r"-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")

# Longer integer literals are a SyntaxError under the interpreter's int conversion limit.
_MAX_NUMBER_LENGTH = 4300


class ValueKind(enum.Enum):
    NULL = "null"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True)
class Value:
    kind: ValueKind
    text: str = ""


NULL = Value(ValueKind.NULL)

# Column name -> value, in the column order the database returned.
Row = dict[str, Value]
Page = list[Row]


def looks_numeric(text: str) -> bool:
    return len(text) <= _MAX_NUMBER_LENGTH and _NUMERIC_RE.fullmatch(text) is not None


def classify(raw: Any) -> Value:
    """Tag one raw DBAPI value as null, number or text."""
    if raw is None:
        return NULL
    if isinstance(raw, bool):
        return Value(ValueKind.NUMBER, "True" if raw else "False")
    if isinstance(raw, int):
        return Value(ValueKind.NUMBER, str(raw))
    if isinstance(raw, float):
        if math.isfinite(raw):
            return Value(ValueKind.NUMBER, repr(raw))
        return Value(ValueKind.TEXT, str(raw))
    if isinstance(raw, Decimal):
        text = str(raw)
        if raw.is_finite() and len(text) <= _MAX_NUMBER_LENGTH:
            return Value(ValueKind.NUMBER, text)
        return Value(ValueKind.TEXT, text)
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return Value(ValueKind.TEXT, bytes(raw).decode("utf-8", errors="replace"))
    if isinstance(raw, (dict, list)):
        # JSON columns
        return Value(ValueKind.TEXT, json.dumps(raw, default=str))
    text = str(raw)
    if isinstance(raw, str) and looks_numeric(text):
        return Value(ValueKind.NUMBER, text)
    return Value(ValueKind.TEXT, text)


def to_row(mapping: Mapping[str, Any]) -> Row:
    return {str(k): classify(v) for k, v in mapping.items()}
