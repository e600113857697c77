"""
jsoncheck.main
------------
AUTHOR: carter-vin

CLI entrypoint for the HTTP JSON check.

Key contract:
- `check-http-json check` runs the check once, prints one status line and
  exits with the status code (0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN).
- Every check option can also be set through its SENSU_CHECK_* env var.
- `check-http-json version` prints tool version & runtime env.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from datetime import datetime, timezone

import typer

from jsoncheck.checker import execute_check
from jsoncheck.config import (
    DEFAULT_QUERY_LANGUAGE,
    DEFAULT_TIMEOUT_S,
    DEFAULT_URL,
    ENV_DEBUG,
    ENV_EXPRESSION,
    ENV_INSECURE_SKIP_VERIFY,
    ENV_QUERY,
    ENV_QUERY_LANGUAGE,
    ENV_TIMEOUT,
    ENV_URL,
    CheckConfig,
    validate_config,
)
from jsoncheck.engines import ENGINE_NAMES
from jsoncheck.logging import emit_event
from jsoncheck.model import (
    CHECK_VERSION,
    CheckOutcome,
    Status,
    render_status_line,
    warning,
)

# Explicit multi-command CLI
app = typer.Typer(
    add_completion=False,
    help="check-http-json: query a JSON endpoint and compare a value to a threshold",
)


# -----------------------------
# DATA CLASSES
# -----------------------------
@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Snapshot of the runtime environment
    """

    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=datetime.now(timezone.utc).isoformat(),
    )


def _report(outcome: CheckOutcome) -> None:
    """
    Print the status line and exit with the status code
    """
    typer.echo(render_status_line(outcome))
    raise typer.Exit(code=int(outcome.status))


# -----------------------------
# ROOT COMMAND BEHAVIOR
# -----------------------------
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """
    Root command behavior: hint when no subcommand is given.
    """
    if ctx.invoked_subcommand is None:
        typer.echo("No command provided. Try: check-http-json --help")


# -----------------------------
# CLI COMMANDS
# -----------------------------
@app.command()
def version() -> None:
    """
    Print check version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"check-http-json v{CHECK_VERSION}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("check")
def check(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        envvar=ENV_DEBUG,
        help="Enable debug mode.",
    ),
    expression: str = typer.Option(
        "",
        "--expression",
        "-e",
        envvar=ENV_EXPRESSION,
        help="Expression for comparing result of query, e.g. '>5' or '<0.5'.",
    ),
    insecure_skip_verify: bool = typer.Option(
        False,
        "--insecure-skip-verify",
        "-i",
        envvar=ENV_INSECURE_SKIP_VERIFY,
        help="Skip TLS certificate verification (not recommended!).",
    ),
    query: str = typer.Option(
        "",
        "--query",
        "-q",
        envvar=ENV_QUERY,
        help="Query for extracting value from JSON.",
    ),
    timeout: int = typer.Option(
        DEFAULT_TIMEOUT_S,
        "--timeout",
        "-T",
        envvar=ENV_TIMEOUT,
        help="Request timeout in seconds.",
    ),
    url: str = typer.Option(
        DEFAULT_URL,
        "--url",
        "-u",
        envvar=ENV_URL,
        help="URL to test.",
    ),
    query_language: str = typer.Option(
        DEFAULT_QUERY_LANGUAGE,
        "--query-language",
        "-l",
        envvar=ENV_QUERY_LANGUAGE,
        help=f"Query language: {' or '.join(ENGINE_NAMES)}.",
    ),
) -> None:
    """
    Fetch URL, extract a value with the query and compare it to the expression.
    """
    config = CheckConfig(
        url=url,
        query=query,
        expression=expression,
        timeout=timeout,
        insecure_skip_verify=insecure_skip_verify,
        debug=debug,
        query_language=query_language,
    )

    missing = validate_config(config)
    if missing is not None:
        _report(warning(missing))

    if config.query_language not in ENGINE_NAMES:
        _report(
            CheckOutcome(
                status=Status.UNKNOWN,
                message=f"unknown query language: {config.query_language}",
            )
        )

    try:
        outcome = execute_check(config)
    except Exception as e:
        # Anything outside the error taxonomy is a plugin fault, not a check result
        emit_event(
            "check_errored",
            check_version=CHECK_VERSION,
            error_type=type(e).__name__,
            message=str(e),
        )
        _report(CheckOutcome(status=Status.UNKNOWN, message=f"unexpected error: {e}"))

    if config.debug:
        emit_event(
            "check_completed",
            check_version=CHECK_VERSION,
            status=outcome.status.name,
            errored=outcome.errored,
        )

    _report(outcome)


if __name__ == "__main__":
    app()
