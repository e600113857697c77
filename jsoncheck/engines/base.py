"""
jsoncheck.engines.base
AUTHOR: carter-vin

Query engine interface

- compile(expr) -> Query, raising QueryCompileError
- Query.run(document) -> lazy iterator of JSON values; evaluation errors
  surface as QueryRuntimeError while iterating
"""

from __future__ import annotations

from typing import Any, Iterator


class Query:
    source: str = ""

    def run(self, document: Any) -> Iterator[Any]:
        raise NotImplementedError


class QueryEngine:
    name: str = "base"

    def compile(self, expr: str) -> Query:
        raise NotImplementedError
