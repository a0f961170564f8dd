"""
statoo command-line interface.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging

import click
from rich.console import Console
from rich.markup import escape

from statoo import __version__
from statoo.completion import BASH_COMPLETION_ARG, EXAMPLES, bash_completion
from statoo.config import get_settings
from statoo.core import RequestEvaluator
from statoo.errors import StatooError
from statoo.flags import (
    BASIC_AUTH_PAIR,
    REQUEST_HEADER_PAIR,
    RESPONSE_HEADER_PAIR,
    TIMEOUT_SECONDS,
)
from statoo.logging_config import setup_logging
from statoo.models import DEFAULT_TIMEOUT, MAX_TIMEOUT, MIN_TIMEOUT
from statoo.validation import validate_request

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, soft_wrap=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "-help", "--help"]}


def fail(error: Exception) -> None:
    """Report an error on stderr and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise SystemExit(1)


@click.command(context_settings=CONTEXT_SETTINGS, epilog=EXAMPLES)
@click.argument("url", required=False, default="")
@click.option("-version", "--version", "show_version", is_flag=True,
              help=f"Display version information ({__version__})")
@click.option("-commithash", "--commithash", "show_commit_hash", is_flag=True,
              help="Display build/commit hash")
@click.option("-verbose", "--verbose", is_flag=True, help="Prefix output with the URL")
@click.option("-j", "-json", "--json", "json_output", is_flag=True, help="Provide JSON output")
@click.option("-t", "-timeout", "--timeout", default=DEFAULT_TIMEOUT, type=TIMEOUT_SECONDS,
              show_default=True,
              help=f"Timeout in seconds (min: {MIN_TIMEOUT}, max: {MAX_TIMEOUT})")
@click.option("-f", "-find", "--find", default="",
              help="Find text in response body if -json is set, case sensitive")
@click.option("-request-header", "--request-header", "request_headers", multiple=True,
              type=REQUEST_HEADER_PAIR,
              help="Request header 'Name: Value', multiple allowed")
@click.option("-response-header", "--response-header", "response_headers", multiple=True,
              type=RESPONSE_HEADER_PAIR,
              help="Response header lookup 'Name: Value' if -json is set, multiple allowed")
@click.option("-a", "-auth", "--auth", "basic_auth", type=BASIC_AUTH_PAIR,
              help="Basic auth 'username:password'")
@click.option("-s", "-skip", "--skip", "insecure", is_flag=True,
              help="Skip certificate check and hostname in that certificate")
@click.pass_context
def statoo(ctx, url: str, show_version: bool, show_commit_hash: bool, verbose: bool,
           json_output: bool, timeout: int, find: str, request_headers: tuple,
           response_headers: tuple, basic_auth: tuple | None, insecure: bool):
    """Check the HTTP status code of URL.

    Performs a single GET request and prints the status code. With -json
    the result also carries timing, an optional body text search and
    optional response header checks.
    """
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        enable_file=settings.log_file is not None,
    )

    if show_version:
        click.echo(__version__)
        return

    if show_commit_hash:
        click.echo(settings.commit_hash)
        return

    if url == BASH_COMPLETION_ARG:
        click.echo(bash_completion())
        return

    if not url:
        click.echo(ctx.get_help())
        return

    try:
        req = validate_request(
            url,
            timeout=timeout,
            request_headers=request_headers,
            basic_auth=basic_auth,
            insecure=insecure,
            find=find,
            response_headers=response_headers,
            json_output=json_output,
            verbose=verbose,
        )
        RequestEvaluator().run(req)
    except StatooError as e:
        logger.debug("Check of %r failed", url, exc_info=True)
        fail(e)


def main():
    """Console script entry point."""
    statoo()


if __name__ == "__main__":
    main()
