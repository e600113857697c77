"""
jsoncheck.extract
AUTHOR: carter-vin

Select + coerce a numeric value from a query result stream

Rules:
- every element is rendered to its string form first
- "null" elements are skipped
- anything else must parse as a float, or the run fails right there
- the LAST non-null element wins
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Iterable

from jsoncheck.errors import ExtractionError

NULL_TEXT = "null"

# Plain decimal float literals; no digit-group underscores
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INF_RE = re.compile(r"[+-]?(?:inf|infinity)", re.IGNORECASE)
_NAN_RE = re.compile(r"nan", re.IGNORECASE)


def render_value(value: Any) -> str:
    """
    String form of a JSON value as produced by a query
    """
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def parse_float(text: str) -> float:
    """
    Parse a decimal float literal; raise ValueError on anything else

    Finite literals that overflow a double are rejected too.
    """
    if _INF_RE.fullmatch(text) or _NAN_RE.fullmatch(text):
        return float(text)

    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')

    value = float(text)
    if math.isinf(value):
        raise ValueError(f'parsing "{text}": value out of range')
    return value


def extract_value(results: Iterable[Any]) -> float:
    """
    Consume results to exhaustion and return the last non-null value
    """
    extracted: float | None = None

    for item in results:
        text = render_value(item)
        if text == NULL_TEXT:
            continue

        try:
            extracted = parse_float(text.strip())
        except ValueError as e:
            raise ExtractionError(f"failed to parse extracted value: {e}") from e

    if extracted is None:
        raise ExtractionError("no valid value extracted")

    return extracted
