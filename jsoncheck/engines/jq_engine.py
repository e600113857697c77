"""
jsoncheck.engines.jq_engine
AUTHOR: carter-vin

jq queries via the jq bindings
"""

from __future__ import annotations

from typing import Any, Iterator

import jq

from jsoncheck.engines.base import Query, QueryEngine
from jsoncheck.errors import QueryCompileError, QueryRuntimeError


class JqQuery(Query):
    def __init__(self, source: str, program: Any) -> None:
        self.source = source
        self._program = program

    def run(self, document: Any) -> Iterator[Any]:
        try:
            yield from self._program.input_value(document)
        except ValueError as e:
            raise QueryRuntimeError(f"failed to evaluate query: {e}") from e


class JqEngine(QueryEngine):
    name = "jq"

    def compile(self, expr: str) -> Query:
        try:
            program = jq.compile(expr)
        except ValueError as e:
            raise QueryCompileError(f"failed to parse query: {e}") from e
        return JqQuery(expr, program)
