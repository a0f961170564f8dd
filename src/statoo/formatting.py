"""
Output rendering for check results.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
from typing import TextIO

from statoo.errors import SerializationError, WriteError
from statoo.models import CheckResult


def format_text(result: CheckResult, verbose: bool = False) -> str:
    """Status code line, prefixed with the URL when verbose."""
    prefix = f"{result.url} -> " if verbose else ""
    return f"{prefix}{result.status}\n"


def format_json(result: CheckResult) -> str:
    """Compact JSON object with no trailing newline."""
    try:
        return json.dumps(result.to_dict(), separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"json marshal error: {e}") from e


def render(result: CheckResult, json_output: bool = False, verbose: bool = False) -> str:
    if json_output:
        return format_json(result)
    return format_text(result, verbose=verbose)


def write_result(
    result: CheckResult,
    out: TextIO,
    json_output: bool = False,
    verbose: bool = False,
) -> None:
    """Render fully, then write once so no partial output reaches the sink."""
    output = render(result, json_output=json_output, verbose=verbose)
    try:
        out.write(output)
        out.flush()
    except OSError as e:
        raise WriteError(f"write error: {e}") from e
