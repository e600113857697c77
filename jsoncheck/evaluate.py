"""
jsoncheck.evaluate
AUTHOR: carter-vin

Threshold evaluation of an extracted value

Supported expressions (closed set):
- ""    -> OK
- ">N"  -> value strictly greater than N
- "<N"  -> value strictly less than N
Anything else is unsupported (WARNING), not an error.
"""

from __future__ import annotations

from typing import Optional

from jsoncheck.extract import parse_float
from jsoncheck.model import CheckOutcome, critical, ok, warning

OP_GREATER = ">"
OP_LESS = "<"


def evaluate_expression(
    value: float,
    expression: str,
    *,
    query: str,
) -> tuple[CheckOutcome, Optional[str]]:
    """
    Evaluate expression against value

    Returns the outcome and the diagnostic event type to emit, if any.
    """
    if expression == "":
        return ok(f"value extracted ({query}): {value:.2f}", value=value), None

    op = expression[0]
    if op not in (OP_GREATER, OP_LESS):
        return (
            warning(f"unsupported expression ({query}) : {expression}", value=value),
            "expression_unsupported",
        )

    try:
        threshold = parse_float(expression[1:].strip())
    except ValueError as e:
        return (
            critical(f"failed to parse expression value ({query}): {e}", value=value),
            "expression_invalid",
        )

    if op == OP_GREATER and not value > threshold:
        return (
            critical(
                f"expression check failed ({query}): {value:.2f} <= {threshold:.2f}",
                value=value,
            ),
            "expression_failed",
        )

    if op == OP_LESS and not value < threshold:
        return (
            critical(
                f"expression check failed ({query}): {value:.2f} >= {threshold:.2f}",
                value=value,
            ),
            "expression_failed",
        )

    return ok(f"expression check passed ({query}): {value:.2f} {expression}", value=value), None
