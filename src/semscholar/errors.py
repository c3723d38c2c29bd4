"""semscholar error types.

All client errors inherit from S2Error for easy catching. Network failures
are not wrapped: httpx.HTTPError subclasses reach the caller unchanged.
"""


class S2Error(Exception):
    """Base exception for all semscholar errors."""

    pass


class S2APIError(S2Error):
    """Non-200 response from the Semantic Scholar API.

    Attributes:
        status_code: HTTP status code from the API
        message: Error message (generated, plus body text where captured)
        operation: Client operation that issued the request
        body: Raw response body text, only captured for batch lookups
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        operation: str = "",
        body: str | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.operation = operation
        self.body = body
        super().__init__(f"{operation}: {message}" if operation else message)


class S2NotFoundError(S2APIError):
    """Resource not found (HTTP 404)."""

    def __init__(self, message: str, operation: str = "", body: str | None = None):
        super().__init__(404, message, operation, body)


class S2RateLimitError(S2APIError):
    """Rate limit exceeded (HTTP 429).

    Carries the Retry-After hint if the API sent one. The client never waits
    or retries on its own.
    """

    def __init__(
        self,
        message: str,
        operation: str = "",
        body: str | None = None,
        retry_after: float | None = None,
    ):
        self.retry_after = retry_after
        super().__init__(429, message, operation, body)


class S2DecodeError(S2Error):
    """Response body was not valid JSON or did not match the expected shape.

    The underlying pydantic ValidationError is available as __cause__.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: failed to decode response: {cause}")


class S2ConfigError(S2Error):
    """Configuration error (invalid settings)."""

    pass
