"""Shared fixtures for the statoo test suite.

The network is replaced by httpx.MockTransport everywhere so no test ever
opens a real connection.
"""
import logging
from typing import Callable

import httpx
import pytest

from statoo.config import Settings, set_settings

from helpers import RecordingTransport, text_response


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for a recording transport around a request handler."""
    return RecordingTransport


@pytest.fixture
def hello_transport() -> RecordingTransport:
    """Server answering 200 with "hello world\\n" and a Server header."""
    return RecordingTransport(
        lambda request: text_response(headers={"Server": "FakeServer"})
    )


@pytest.fixture
def patch_transport(monkeypatch):
    """Force every httpx.AsyncClient built by statoo.client onto a given transport.

    Returns a function taking a transport; it returns the list collecting the
    kwargs of each client construction.
    """
    real_client = httpx.AsyncClient
    constructed: list[dict] = []

    def install(transport: httpx.AsyncBaseTransport) -> list[dict]:
        def fake_client(**kwargs):
            constructed.append(dict(kwargs))
            kwargs["transport"] = transport
            return real_client(**kwargs)

        monkeypatch.setattr("statoo.client.httpx.AsyncClient", fake_client)
        return constructed

    return install


@pytest.fixture(autouse=True)
def isolated_settings():
    """Default settings for each test, regardless of the environment."""
    set_settings(Settings())
    yield
    set_settings(None)
    logger = logging.getLogger("statoo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
