"""
jsoncheck.errors
AUTHOR: carter-vin

Hard error taxonomy. Each one ends the run as CRITICAL with the error attached.
"""

from __future__ import annotations


class CheckError(Exception):
    """Base for failures that abort a check run."""


class FetchError(CheckError):
    pass


class BodyReadError(CheckError):
    pass


class DecodeError(CheckError):
    pass


class QueryCompileError(CheckError):
    pass


class QueryRuntimeError(CheckError):
    pass


class ExtractionError(CheckError):
    pass
