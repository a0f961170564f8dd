"""
HTTP client performing the single GET of a check.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
import time

import httpx

from statoo import __version__
from statoo.errors import NetworkError, RequestConstructionError
from statoo.models import DEFAULT_TIMEOUT, CheckRequest, RawResponse

logger = logging.getLogger(__name__)

USER_AGENT = f"statoo/{__version__}"
MAX_REDIRECTS = 10


class HTTPClient:
    """
    HTTP client for one check.

    The exchange runs on httpx.AsyncClient so that a single deadline covers
    connect, redirects, headers and body together.

    Usage:
        client = HTTPClient(timeout=10)
        raw = client.fetch(request)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.transport = transport

    @classmethod
    def for_request(
        cls, req: CheckRequest, transport: httpx.AsyncBaseTransport | None = None
    ) -> "HTTPClient":
        return cls(timeout=req.timeout, verify_ssl=not req.insecure, transport=transport)

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            verify=self.verify_ssl,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            transport=self.transport,
        )

    def build_headers(self, req: CheckRequest) -> httpx.Headers:
        """Default headers, then user headers; later names overwrite earlier ones."""
        headers = httpx.Headers({
            "User-Agent": USER_AGENT,
            "Accept-Encoding": "gzip",
        })
        for name, value in req.request_headers:
            headers[name] = value
        return headers

    def _timed_out(self) -> NetworkError:
        return NetworkError(f"response error: request timed out after {self.timeout}s")

    def fetch(self, req: CheckRequest, read_body: bool = False) -> RawResponse:
        """Perform the GET and return status, headers and optionally the raw body.

        The whole exchange, body included, must finish within the timeout.
        The body is returned still content-encoded; decoding is left to the
        caller.

        Raises:
            RequestConstructionError: request could not be built or sent
            NetworkError: transport failure or deadline exceeded
        """
        try:
            return asyncio.run(
                asyncio.wait_for(self._fetch(req, read_body), timeout=self.timeout)
            )
        except asyncio.TimeoutError as e:
            raise self._timed_out() from e

    async def _fetch(self, req: CheckRequest, read_body: bool) -> RawResponse:
        async with self._build_client() as client:
            try:
                request = client.build_request("GET", req.url, headers=self.build_headers(req))
            except (httpx.InvalidURL, UnicodeEncodeError) as e:
                raise RequestConstructionError(f"request error: {e}") from e

            auth = httpx.BasicAuth(*req.basic_auth) if req.basic_auth else None
            logger.debug("GET %s (timeout=%ss, verify=%s)", req.url, self.timeout, self.verify_ssl)

            start_time = time.perf_counter()
            try:
                response = await client.send(request, auth=auth, stream=True)
            except httpx.UnsupportedProtocol as e:
                raise RequestConstructionError(f"request error: {e}") from e
            except httpx.TimeoutException as e:
                raise self._timed_out() from e
            except httpx.ConnectError as e:
                raise NetworkError(f"response error: connection failed: {e}") from e
            except httpx.TooManyRedirects as e:
                raise NetworkError(f"response error: stopped after {MAX_REDIRECTS} redirects") from e
            except httpx.RequestError as e:
                raise NetworkError(f"response error: {e}") from e

            elapsed_ms = (time.perf_counter() - start_time) * 1000

            try:
                body = await self._read_raw(response) if read_body else None
            finally:
                await response.aclose()

        logger.debug("%s answered %d in %.2fms", req.url, response.status_code, elapsed_ms)
        return RawResponse(
            status_code=response.status_code,
            headers=response.headers,
            elapsed_ms=elapsed_ms,
            body=body,
        )

    async def _read_raw(self, response: httpx.Response) -> bytes:
        """Read the undecoded body."""
        chunks = []
        try:
            async for chunk in response.aiter_raw():
                chunks.append(chunk)
        except httpx.TimeoutException as e:
            raise self._timed_out() from e
        except httpx.RequestError as e:
            raise NetworkError(f"response error: {e}") from e
        return b"".join(chunks)
