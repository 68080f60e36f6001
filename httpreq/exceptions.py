"""Exceptions for httpreq."""


class HttpReqError(Exception):
    """Base exception for all httpreq errors."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """
        Initialize HttpReqError.

        Args:
            message: Error message
            cause: Underlying exception, if any
        """
        self.message = message
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        detail = str(self.cause) if self.cause is not None else ""
        if not detail:
            return self.message
        return f"{self.message}: {detail}"


class RequestConstructionError(HttpReqError):
    """Raised when the method or URL cannot form a valid request."""

    def __init__(
        self, message: str = "creating request", cause: BaseException | None = None
    ) -> None:
        """Initialize RequestConstructionError."""
        super().__init__(message, cause)


class TransportError(HttpReqError):
    """Raised when the request cannot be delivered or the deadline expires."""

    def __init__(
        self, message: str = "sending request", cause: BaseException | None = None
    ) -> None:
        """Initialize TransportError."""
        super().__init__(message, cause)


class ResponseReadError(HttpReqError):
    """Raised when the response body cannot be fully read."""

    def __init__(
        self, message: str = "reading response", cause: BaseException | None = None
    ) -> None:
        """Initialize ResponseReadError."""
        super().__init__(message, cause)


class UnacceptableStatusError(HttpReqError):
    """Raised when the status code is not in the acceptable set."""

    def __init__(self, status_code: int) -> None:
        """Initialize UnacceptableStatusError."""
        self.status_code = status_code
        super().__init__(f"unacceptable status code: {status_code}")


class UnmarshalError(HttpReqError):
    """Raised when the response body does not decode into the requested type."""

    def __init__(
        self, message: str = "unmarshaling response", cause: BaseException | None = None
    ) -> None:
        """Initialize UnmarshalError."""
        super().__init__(message, cause)
