"""
Input validation for a check.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Iterable
from urllib.parse import urlsplit

from statoo.errors import EmptyURLError, TimeoutOutOfRangeError, URLParseError
from statoo.flags import (
    BASIC_AUTH,
    REQUEST_HEADER,
    RESPONSE_HEADER,
    parse_colon_pair,
    parse_pairs,
)
from statoo.models import DEFAULT_TIMEOUT, MAX_TIMEOUT, MIN_TIMEOUT, CheckRequest

logger = logging.getLogger(__name__)


def validate_url(url: str) -> str:
    """Require an absolute request URI (scheme and host)."""
    if not url:
        raise EmptyURLError()

    try:
        parsed = urlsplit(url)
    except ValueError as e:
        raise URLParseError(url, str(e)) from e

    if not parsed.scheme or not parsed.netloc:
        raise URLParseError(url)
    return url


def validate_timeout(timeout: int) -> int:
    if timeout < MIN_TIMEOUT or timeout > MAX_TIMEOUT:
        raise TimeoutOutOfRangeError(timeout)
    return timeout


def validate_request(
    url: str,
    timeout: int = DEFAULT_TIMEOUT,
    request_headers: Iterable[str | tuple[str, str]] = (),
    basic_auth: str | tuple[str, str] | None = None,
    insecure: bool = False,
    find: str = "",
    response_headers: Iterable[str | tuple[str, str]] = (),
    json_output: bool = False,
    verbose: bool = False,
) -> CheckRequest:
    """Build a CheckRequest, checking URL first and timeout second.

    Header and auth values may be raw "Name: Value" strings or pairs the
    CLI already validated; both go through the same colon-pair rules.

    Raises:
        InputError: on the first invalid value
    """
    validate_url(url)
    validate_timeout(timeout)

    auth = None
    if basic_auth:
        if isinstance(basic_auth, tuple):
            basic_auth = f"{basic_auth[0]}:{basic_auth[1]}"
        auth = parse_colon_pair(basic_auth, BASIC_AUTH)

    request = CheckRequest(
        url=url,
        timeout=timeout,
        request_headers=parse_pairs(request_headers, REQUEST_HEADER),
        basic_auth=auth,
        insecure=insecure,
        find=find or "",
        response_headers=parse_pairs(response_headers, RESPONSE_HEADER),
        json_output=json_output,
        verbose=verbose,
    )
    logger.debug(
        "Validated check for %s (timeout=%ss, headers=%d, expectations=%d)",
        url, timeout, len(request.request_headers), len(request.response_headers),
    )
    return request
