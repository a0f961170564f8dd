"""
Parsing for colon-separated flag values.

Request headers, response-header expectations and basic-auth credentials
all share the same "left:right" shape and go through parse_colon_pair().

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typing import Iterable

import click

from statoo.errors import InputError, MalformedAuthError, MalformedHeaderError


# Flag kinds, used in error messages
REQUEST_HEADER = "request header"
RESPONSE_HEADER = "response header"
BASIC_AUTH = "basic auth"


def _error_class(kind: str) -> type[InputError]:
    if kind == BASIC_AUTH:
        return MalformedAuthError
    return MalformedHeaderError


def parse_colon_pair(value: str, kind: str = REQUEST_HEADER) -> tuple[str, str]:
    """Split "left: right" into two trimmed, non-empty fields.

    Args:
        value: Raw flag value
        kind: Flag kind for error messages (REQUEST_HEADER, RESPONSE_HEADER,
            BASIC_AUTH)

    Returns:
        (left, right) tuple

    Raises:
        MalformedHeaderError: header value is not a single pair
        MalformedAuthError: auth value is not a single pair
    """
    error_cls = _error_class(kind)
    raw = value.strip()
    if not raw:
        raise error_cls(f"empty {kind} value")
    if raw.count(":") != 1:
        raise error_cls(f"invalid {kind} value: {raw}")

    left, right = (part.strip() for part in raw.split(":"))
    if not left or not right:
        raise error_cls(f"invalid {kind} value: {raw}")
    return left, right


def parse_pairs(
    values: Iterable[str | tuple[str, str]], kind: str = REQUEST_HEADER
) -> tuple[tuple[str, str], ...]:
    """Validate a list of raw strings or already-split pairs, keeping order."""
    pairs = []
    for value in values:
        if isinstance(value, tuple):
            value = f"{value[0]}:{value[1]}"
        pairs.append(parse_colon_pair(value, kind))
    return tuple(pairs)


class FlagValueError(click.BadParameter):
    """Rejected flag value; exits with status 1 like other input errors."""
    exit_code = 1


class ColonPairType(click.ParamType):
    """Click parameter type validating "Name: Value" style flags."""

    name = "pair"

    def __init__(self, kind: str = REQUEST_HEADER):
        self.kind = kind

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        try:
            return parse_colon_pair(value, self.kind)
        except InputError as e:
            raise FlagValueError(str(e), ctx=ctx, param=param) from e


REQUEST_HEADER_PAIR = ColonPairType(REQUEST_HEADER)
RESPONSE_HEADER_PAIR = ColonPairType(RESPONSE_HEADER)
BASIC_AUTH_PAIR = ColonPairType(BASIC_AUTH)


class TimeoutType(click.ParamType):
    """Integer seconds; range is checked later, after the URL."""

    name = "seconds"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise FlagValueError(f"invalid timeout value: {value}", ctx=ctx, param=param) from e


TIMEOUT_SECONDS = TimeoutType()
