"""jsoncheck.engines registry."""

from __future__ import annotations

from jsoncheck.engines.base import Query, QueryEngine
from jsoncheck.engines.jq_engine import JqEngine
from jsoncheck.engines.jsonpath_engine import JsonPathEngine

_ENGINES = {
    "jq": JqEngine(),
    "jsonpath": JsonPathEngine(),
}

ENGINE_NAMES = tuple(sorted(_ENGINES))


def get_engine(name: str) -> QueryEngine:
    if name not in _ENGINES:
        raise ValueError(f"unknown query language: {name}")
    return _ENGINES[name]


__all__ = [
    "ENGINE_NAMES",
    "JqEngine",
    "JsonPathEngine",
    "Query",
    "QueryEngine",
    "get_engine",
]
