"""
jsoncheck.checker
AUTHOR: carter-vin

One fetch -> parse -> query -> extract -> compare cycle.

Failure semantics:
- hard errors (CheckError) end the run as CRITICAL with the error attached
- failed/unsupported expressions end the run with a message only, plus a
  diagnostic event
- nothing is retried; the first failure wins
"""

from __future__ import annotations

from jsoncheck.config import CheckConfig
from jsoncheck.engines import QueryEngine, get_engine
from jsoncheck.errors import CheckError
from jsoncheck.evaluate import evaluate_expression
from jsoncheck.extract import extract_value
from jsoncheck.fetch import HttpGet, decode_document, fetch_body
from jsoncheck.logging import emit_event
from jsoncheck.model import CHECK_VERSION, CheckOutcome, errored


def _extract(
    config: CheckConfig,
    engine: QueryEngine,
    http_get: HttpGet | None,
) -> float:
    body = fetch_body(config, http_get=http_get)
    document = decode_document(body)

    if config.debug:
        emit_event(
            "document_parsed",
            check_version=CHECK_VERSION,
            url=config.url,
            bytes=len(body),
            document=document,
        )

    query = engine.compile(config.query)
    value = extract_value(query.run(document))

    if config.debug:
        emit_event(
            "value_extracted",
            check_version=CHECK_VERSION,
            query=config.query,
            value=value,
        )

    return value


def execute_check(
    config: CheckConfig,
    *,
    engine: QueryEngine | None = None,
    http_get: HttpGet | None = None,
) -> CheckOutcome:
    """
    Run the check once and return its outcome

    engine defaults to the one named by config.query_language;
    http_get defaults to requests.get.
    """
    if engine is None:
        engine = get_engine(config.query_language)

    if config.debug:
        emit_event(
            "check_start",
            check_version=CHECK_VERSION,
            url=config.url,
            query=config.query,
            expression=config.expression,
            query_language=engine.name,
            timeout_s=config.timeout,
            insecure_skip_verify=config.insecure_skip_verify,
        )

    try:
        value = _extract(config, engine, http_get)
    except CheckError as e:
        emit_event(
            "check_errored",
            check_version=CHECK_VERSION,
            error_type=type(e).__name__,
            message=str(e),
        )
        return errored(str(e))

    outcome, event_type = evaluate_expression(value, config.expression, query=config.query)

    if event_type is not None:
        emit_event(
            event_type,
            check_version=CHECK_VERSION,
            query=config.query,
            expression=config.expression,
            value=value,
            message=outcome.message,
        )

    return outcome
