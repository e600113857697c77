"""
jsoncheck.engines.jsonpath_engine
AUTHOR: carter-vin

JSONPath queries via jsonpath-ng

Matches are collected by jsonpath-ng up front, then handed out in
document order.
"""

from __future__ import annotations

from typing import Any, Iterator

from jsonpath_ng import parse as jp_parse
from jsonpath_ng.exceptions import JSONPathError

from jsoncheck.engines.base import Query, QueryEngine
from jsoncheck.errors import QueryCompileError, QueryRuntimeError


class JsonPathQuery(Query):
    def __init__(self, source: str, path: Any) -> None:
        self.source = source
        self._path = path

    def run(self, document: Any) -> Iterator[Any]:
        try:
            matches = self._path.find(document)
        except (JSONPathError, TypeError, ValueError) as e:
            raise QueryRuntimeError(f"failed to evaluate query: {e}") from e

        for match in matches:
            yield match.value


class JsonPathEngine(QueryEngine):
    name = "jsonpath"

    def compile(self, expr: str) -> Query:
        try:
            path = jp_parse(expr)
        except (JSONPathError, ValueError) as e:
            raise QueryCompileError(f"failed to parse query: {e}") from e
        return JsonPathQuery(expr, path)
