"""HTTP transport abstraction.

S2Client depends only on the ``HTTPClient`` protocol, so any object that can
send an ``httpx.Request`` works: a real ``httpx.Client``, one backed by
``httpx.MockTransport`` in tests, or a caller's own instrumented client.
"""

from typing import Protocol, runtime_checkable

import httpx

DEFAULT_TIMEOUT_SECONDS = 10.0
USER_AGENT = "semscholar/1.0.0"


@runtime_checkable
class HTTPClient(Protocol):
    """Anything that sends a request and returns a response."""

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...


def default_http_client(timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> httpx.Client:
    """Build the network client used when the caller does not inject one.

    Args:
        timeout_seconds: Per-request timeout bounding connect/read/write hangs

    Returns:
        A new ``httpx.Client``; the caller owns it and must close it
    """
    return httpx.Client(
        headers={"User-Agent": USER_AGENT},
        timeout=httpx.Timeout(timeout_seconds),
    )
