"""Test helpers: canned responses, slow servers and a recording mock transport."""
import asyncio
import gzip
import socket
import threading
import time
from typing import Callable

import httpx

TEST_URL = "http://statoo.test/health"


def text_response(body: bytes = b"hello world\n", status: int = 200, headers=None,
                  gzipped: bool = False) -> httpx.Response:
    """Build an unread response so the client sees the raw (encoded) bytes."""
    headers = dict(headers or {})
    if gzipped:
        body = gzip.compress(body)
        headers["Content-Encoding"] = "gzip"
    return httpx.Response(status, headers=headers, stream=httpx.ByteStream(body))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


class SlowByteStream(httpx.AsyncByteStream):
    """Body delivered chunk by chunk with a pause before each chunk."""

    def __init__(self, chunks: list[bytes], delay: float):
        self.chunks = chunks
        self.delay = delay

    async def __aiter__(self):
        for chunk in self.chunks:
            await asyncio.sleep(self.delay)
            yield chunk


class DripServer:
    """Local HTTP server writing one complete response a few bytes at a time.

    Usage:
        with DripServer(step=5, delay=0.3) as server:
            ... GET server.url ...
    """

    RESPONSE = (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/plain\r\n"
        b"Content-Length: 12\r\n"
        b"Connection: close\r\n"
        b"\r\n"
        b"hello world\n"
    )

    def __init__(self, step: int = 5, delay: float = 0.3):
        self.step = step
        self.delay = delay
        self._stop = threading.Event()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(1)
        self._thread = threading.Thread(target=self._serve, daemon=True)

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self._sock.getsockname()[1]}/"

    def __enter__(self) -> "DripServer":
        self._thread.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._stop.set()
        self._sock.close()
        self._thread.join(timeout=2)

    def _serve(self) -> None:
        try:
            conn, _ = self._sock.accept()
        except OSError:
            return
        with conn:
            try:
                conn.recv(65536)
                for i in range(0, len(self.RESPONSE), self.step):
                    if self._stop.is_set():
                        break
                    conn.sendall(self.RESPONSE[i:i + self.step])
                    time.sleep(self.delay)
            except OSError:
                pass
