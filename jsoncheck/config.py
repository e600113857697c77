"""
jsoncheck.config
AUTHOR: carter-vin

Check configuration, resolved once at startup and passed explicitly.

Binding (flag / env var) lives in jsoncheck.main; this module only holds
the resolved values and the required-field rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_URL = "http://localhost:80/"
DEFAULT_TIMEOUT_S = 15
DEFAULT_QUERY_LANGUAGE = "jq"

# Env var names kept compatible with existing check definitions
ENV_DEBUG = "SENSU_CHECK_DEBUG"
ENV_EXPRESSION = "SENSU_CHECK_EXPRESSION"
ENV_INSECURE_SKIP_VERIFY = "SENSU_CHECK_INSECURE_SKIP_VERIFY"
ENV_QUERY = "SENSU_CHECK_QUERY"
ENV_TIMEOUT = "SENSU_CHECK_TIMEOUT"
ENV_URL = "SENSU_CHECK_URL"
ENV_QUERY_LANGUAGE = "SENSU_CHECK_QUERY_LANGUAGE"


@dataclass(frozen=True)
class CheckConfig:
    """
    Resolved check configuration
    - url: target to GET
    - query: expression selecting value(s) from the JSON body
    - expression: "" | ">N" | "<N"
    - timeout: request timeout, seconds
    - insecure_skip_verify: disable TLS certificate verification
    - debug: emit the parsed document and extracted value as events
    - query_language: engine name ("jq" or "jsonpath")
    """

    url: str = DEFAULT_URL
    query: str = ""
    expression: str = ""
    timeout: int = DEFAULT_TIMEOUT_S
    insecure_skip_verify: bool = False
    debug: bool = False
    query_language: str = DEFAULT_QUERY_LANGUAGE


def validate_config(config: CheckConfig) -> Optional[str]:
    """
    Return the first missing required field as a message, or None

    Order is fixed: expression, query, url.
    """
    if config.expression == "":
        return "expression is required"
    if config.query == "":
        return "query is required"
    if config.url == "":
        return "url is required"
    return None
