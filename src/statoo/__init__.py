"""
statoo - HTTP status checker

A small command-line tool that performs one HTTP GET against a URL and
reports the status code, optionally as JSON with a body text search and
response header checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "2.0.0"
__commit_hash__ = "<unknown>"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

from statoo.core import RequestEvaluator, interpret_response
from statoo.models import CheckRequest, CheckResult
from statoo.validation import validate_request

__all__ = [
    "CheckRequest",
    "CheckResult",
    "RequestEvaluator",
    "interpret_response",
    "validate_request",
]
