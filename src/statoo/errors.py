"""
Exception taxonomy for statoo.

Every failure of a check is terminal for the invocation: nothing here is
retried or turned into a partial result.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class StatooError(Exception):
    """Base exception for statoo errors."""
    pass


# =============================================================================
# Input errors (raised before any I/O)
# =============================================================================

class InputError(StatooError):
    """Invalid user input; the request is never attempted."""
    pass


class EmptyURLError(InputError):
    """No URL was given."""

    def __init__(self):
        super().__init__('url parse error: parse "": empty url')


class URLParseError(InputError):
    """URL is not an absolute request URI."""

    def __init__(self, url: str, reason: str = "invalid URI for request"):
        self.url = url
        self.reason = reason
        super().__init__(f'url parse error: parse "{url}": {reason}')


class TimeoutOutOfRangeError(InputError):
    """Timeout outside the accepted bounds."""

    def __init__(self, timeout: int):
        self.timeout = timeout
        super().__init__(f"invalid timeout value: {timeout}")


class MalformedHeaderError(InputError):
    """Header string is not a single "Name: Value" pair."""
    pass


class MalformedAuthError(InputError):
    """Basic auth string is not a single "user:pass" pair."""
    pass


# =============================================================================
# Runtime errors
# =============================================================================

class RequestConstructionError(StatooError):
    """The HTTP request could not be built."""
    pass


class NetworkError(StatooError):
    """Connection, DNS, TLS or timeout failure."""
    pass


class BodyReadError(StatooError):
    """Response body could not be read or decompressed."""
    pass


class OutputError(StatooError):
    """Result could not be rendered or written."""
    pass


class SerializationError(OutputError):
    """Result could not be encoded as JSON."""
    pass


class WriteError(OutputError):
    """Output sink rejected the write."""
    pass
