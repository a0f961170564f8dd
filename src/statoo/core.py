"""
Check pipeline: execute the request, interpret the response, format output.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import gzip
import logging
import sys
import zlib
from datetime import datetime, timezone
from typing import TextIO

import httpx

from statoo.client import HTTPClient
from statoo.errors import BodyReadError
from statoo.formatting import write_result
from statoo.models import CheckRequest, CheckResult, RawResponse

logger = logging.getLogger(__name__)


def decode_body(raw: RawResponse) -> bytes:
    """Undo gzip content-encoding; any other encoding is returned as-is."""
    body = raw.body or b""
    if raw.content_encoding != "gzip":
        return body
    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        raise BodyReadError(f"body read (gzip) error: {e}") from e


def match_response_headers(
    headers: httpx.Headers, expectations: tuple[tuple[str, str], ...]
) -> dict[str, bool]:
    """Compare the first value of each expected header, case-insensitive by name."""
    results = {}
    for name, expected in expectations:
        values = headers.get_list(name)
        results[f"{name}={expected}"] = bool(values) and values[0] == expected
    return results


def interpret_response(
    raw: RawResponse,
    req: CheckRequest,
    checked_at: datetime | None = None,
) -> CheckResult:
    """Turn a raw response into a CheckResult.

    Status codes are reported as-is; a 404 or 500 is still a successful check.

    Raises:
        BodyReadError: gzip body could not be decompressed
    """
    result = CheckResult(
        url=req.url,
        status=raw.status_code,
        checked_at=checked_at or datetime.now(timezone.utc),
        elapsed_ms=raw.elapsed_ms,
        skip_certificate_check=req.insecure,
    )

    if not req.json_output:
        return result

    if req.response_headers:
        result.response_headers = match_response_headers(raw.headers, req.response_headers)

    if req.find:
        body = decode_body(raw)
        result.find = req.find
        result.found = req.find.encode("utf-8") in body
        result.length = len(body)

    return result


class RequestEvaluator:
    """Runs one check from a validated request to a single output write."""

    def __init__(
        self,
        out: TextIO | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.out = out if out is not None else sys.stdout
        self.transport = transport

    def evaluate(self, req: CheckRequest) -> CheckResult:
        """Execute and interpret, without writing anything."""
        client = HTTPClient.for_request(req, transport=self.transport)
        raw = client.fetch(req, read_body=req.wants_body)
        result = interpret_response(raw, req)
        logger.info("Checked %s: %d", req.url, result.status)
        return result

    def run(self, req: CheckRequest) -> CheckResult:
        """Execute, interpret and write the result to the output sink."""
        result = self.evaluate(req)
        write_result(result, self.out, json_output=req.json_output, verbose=req.verbose)
        return result
