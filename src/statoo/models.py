"""
Data models for a single check.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx


DEFAULT_TIMEOUT = 10
MIN_TIMEOUT = 1
MAX_TIMEOUT = 100


@dataclass(frozen=True)
class CheckRequest:
    """Validated, immutable configuration for one check."""
    url: str
    timeout: int = DEFAULT_TIMEOUT
    request_headers: tuple[tuple[str, str], ...] = ()
    basic_auth: tuple[str, str] | None = None  # (username, password)
    insecure: bool = False
    find: str = ""
    response_headers: tuple[tuple[str, str], ...] = ()  # expectations

    # Output options
    json_output: bool = False
    verbose: bool = False

    @property
    def wants_body(self) -> bool:
        """Body is only read for a body search in JSON mode."""
        return self.json_output and bool(self.find)


@dataclass
class RawResponse:
    """What the executor hands to the interpreter."""
    status_code: int
    headers: httpx.Headers
    elapsed_ms: float
    body: bytes | None = None  # still content-encoded

    @property
    def content_encoding(self) -> str:
        return self.headers.get("content-encoding", "").strip().lower()


def format_timestamp(value: datetime) -> str:
    """RFC3339 with a Z suffix for UTC."""
    value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


@dataclass
class CheckResult:
    """Interpreted result of a check."""
    url: str
    status: int
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    elapsed_ms: float = 0.0
    length: int = 0
    find: str | None = None
    found: bool | None = None
    skip_certificate_check: bool = False
    response_headers: dict[str, bool] | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON object with empty optional fields left out."""
        data: dict[str, Any] = {
            "url": self.url,
            "status": self.status,
            "checked_at": format_timestamp(self.checked_at),
        }
        if self.elapsed_ms:
            data["elapsed"] = self.elapsed_ms
        if self.length:
            data["length"] = self.length
        if self.find is not None:
            data["find"] = self.find
        if self.found is not None:
            data["found"] = self.found
        if self.skip_certificate_check:
            data["skipcc"] = True
        if self.response_headers is not None:
            data["response_headers"] = self.response_headers
        return data
