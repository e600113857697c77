"""
Contract tests for HTTP fetch and JSON decode
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from jsoncheck.config import CheckConfig
from jsoncheck.errors import BodyReadError, DecodeError, FetchError
from jsoncheck.fetch import decode_document, fetch_body


def _response(body: bytes) -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.iter_content.return_value = [body]
    return response


@patch("jsoncheck.fetch.requests.get")
def test_fetch_passes_timeout_and_verify(mock_get) -> None:
    mock_get.return_value = _response(b'{"a": 1}')
    config = CheckConfig(url="https://example.test/status", timeout=7, insecure_skip_verify=True)

    body = fetch_body(config)

    assert body == b'{"a": 1}'
    mock_get.assert_called_once()
    args, kwargs = mock_get.call_args
    assert args == ("https://example.test/status",)
    assert kwargs["timeout"] == 7
    assert kwargs["verify"] is False


@patch("jsoncheck.fetch.requests.get")
def test_fetch_verifies_tls_by_default(mock_get) -> None:
    mock_get.return_value = _response(b"{}")

    fetch_body(CheckConfig(url="https://example.test/"))

    assert mock_get.call_args.kwargs["verify"] is True


@patch("jsoncheck.fetch.requests.get")
def test_zero_timeout_means_no_timeout(mock_get) -> None:
    """
    timeout 0 disables the timeout instead of being rejected by the client
    """
    mock_get.return_value = _response(b"{}")

    body = fetch_body(CheckConfig(timeout=0))

    assert body == b"{}"
    assert mock_get.call_args.kwargs["timeout"] is None


@patch("jsoncheck.fetch.requests.get")
def test_negative_timeout_means_no_timeout(mock_get) -> None:
    mock_get.return_value = _response(b"{}")

    fetch_body(CheckConfig(timeout=-5))

    assert mock_get.call_args.kwargs["timeout"] is None


@patch("jsoncheck.fetch.requests.get")
def test_fetch_network_error(mock_get) -> None:
    mock_get.side_effect = requests.exceptions.ConnectionError("connection refused")

    with pytest.raises(FetchError, match="failed to fetch URL: connection refused"):
        fetch_body(CheckConfig())


@patch("jsoncheck.fetch.requests.get")
def test_fetch_timeout(mock_get) -> None:
    mock_get.side_effect = requests.exceptions.Timeout("read timed out")

    with pytest.raises(FetchError, match="failed to fetch URL"):
        fetch_body(CheckConfig())


def test_body_read_error() -> None:
    response = MagicMock()
    response.iter_content.side_effect = requests.exceptions.ChunkedEncodingError(
        "connection broken"
    )
    http_get = MagicMock(return_value=response)

    with pytest.raises(BodyReadError, match="failed to read response body: connection broken"):
        fetch_body(CheckConfig(), http_get=http_get)


@patch("jsoncheck.fetch.time")
def test_slow_body_exceeds_overall_timeout(mock_time) -> None:
    """
    timeout bounds the whole fetch, not each socket read
    """
    mock_time.monotonic.side_effect = [0.0, 1.0, 6.0]
    response = MagicMock()
    response.iter_content.return_value = [b'{"a": ', b"1}", b""]
    http_get = MagicMock(return_value=response)

    with pytest.raises(BodyReadError, match="timed out after 5s"):
        fetch_body(CheckConfig(timeout=5), http_get=http_get)


@patch("jsoncheck.fetch.time")
def test_body_in_chunks_within_timeout(mock_time) -> None:
    mock_time.monotonic.side_effect = [0.0, 1.0, 2.0]
    response = MagicMock()
    response.iter_content.return_value = [b'{"a": ', b"1}"]
    http_get = MagicMock(return_value=response)

    assert fetch_body(CheckConfig(timeout=5), http_get=http_get) == b'{"a": 1}'


def test_http_status_is_not_judged() -> None:
    response = _response(b'{"error": "down", "healthy": 0}')
    response.status_code = 503
    http_get = MagicMock(return_value=response)

    assert fetch_body(CheckConfig(), http_get=http_get) == b'{"error": "down", "healthy": 0}'


def test_decode_object() -> None:
    assert decode_document(b'{"a": {"b": [1, 2]}}') == {"a": {"b": [1, 2]}}


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"",
        b'{"a": 1',
        b'{"a": NaN}',
        b'{"a": 1e400}',
        b'{"a": -1e400}',
        b'{"a": 1' + b"0" * 400 + b"}",
    ],
)
def test_decode_invalid_json(body: bytes) -> None:
    with pytest.raises(DecodeError, match="failed to unmarshal JSON response"):
        decode_document(body)


@pytest.mark.parametrize("body", [b"[1, 2]", b"3", b'"x"', b"null"])
def test_decode_requires_object(body: bytes) -> None:
    with pytest.raises(DecodeError, match="expected an object"):
        decode_document(body)
