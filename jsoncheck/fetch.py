"""
jsoncheck.fetch
AUTHOR: carter-vin

HTTP fetch + JSON document decode

- One GET per run; no retries
- Body is read fully before decoding
- timeout bounds the whole fetch, body included; 0 or less means no timeout
- HTTP status code is not judged; the query decides
"""

from __future__ import annotations

import json
import math
import time
from typing import Any, Callable

import requests

from jsoncheck.config import CheckConfig
from jsoncheck.errors import BodyReadError, DecodeError, FetchError

USER_AGENT = "check-http-json"
READ_CHUNK_BYTES = 64 * 1024

HttpGet = Callable[..., requests.Response]


def fetch_body(config: CheckConfig, *, http_get: HttpGet | None = None) -> bytes:
    """
    GET config.url and return the full response body
    """
    get = http_get if http_get is not None else requests.get
    timeout = config.timeout if config.timeout > 0 else None
    deadline = time.monotonic() + timeout if timeout is not None else None

    try:
        response = get(
            config.url,
            timeout=timeout,
            verify=not config.insecure_skip_verify,
            headers={"User-Agent": USER_AGENT},
            stream=True,
        )
    except requests.exceptions.RequestException as e:
        raise FetchError(f"failed to fetch URL: {e}") from e

    # stream=True defers the body so read failures surface separately
    chunks: list[bytes] = []
    try:
        with response:
            for chunk in response.iter_content(chunk_size=READ_CHUNK_BYTES):
                chunks.append(chunk)
                if deadline is not None and time.monotonic() > deadline:
                    raise BodyReadError(
                        f"failed to read response body: timed out after {timeout}s"
                    )
    except requests.exceptions.RequestException as e:
        raise BodyReadError(f"failed to read response body: {e}") from e

    return b"".join(chunks)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} out of range")
    return value


def _parse_finite_int(text: str) -> int:
    value = int(text)
    try:
        float(value)
    except OverflowError as e:
        raise ValueError(f"number {text} out of range") from e
    return value


def decode_document(body: bytes) -> dict[str, Any]:
    """
    Decode body as a JSON object (key -> value mapping)

    NaN/Infinity tokens and numbers that overflow a double are rejected.
    """
    try:
        document = json.loads(
            body,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
            parse_int=_parse_finite_int,
        )
    except ValueError as e:
        raise DecodeError(f"failed to unmarshal JSON response: {e}") from e

    if not isinstance(document, dict):
        raise DecodeError(
            "failed to unmarshal JSON response: "
            f"expected an object, got {type(document).__name__}"
        )

    return document
