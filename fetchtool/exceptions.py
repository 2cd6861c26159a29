"""Exceptions raised by fetchtool."""


class FetchToolError(Exception):
    """Base exception for fetchtool errors."""

    pass


class UsageError(FetchToolError):
    """Raised when the command line cannot be turned into a fetch."""

    pass


class MissingURLError(UsageError):
    """Raised when no URL was supplied."""

    def __init__(self, message: str = "URL is required") -> None:
        super().__init__(message)


class InvalidURLError(UsageError, ValueError):
    """Raised when a URL is not a syntactically valid URI reference."""

    def __init__(self, url: str, reason: str = "Invalid URL") -> None:
        super().__init__(reason)
        self.url = url
        self.reason = reason


class TransportFailure(FetchToolError):
    """Raised when every fetch attempt failed.

    The message is the cause of the last attempt; earlier failures are
    discarded.
    """

    def __init__(self, cause: str, attempts: int = 1) -> None:
        super().__init__(cause)
        self.cause = cause
        self.attempts = attempts


class OutputError(FetchToolError):
    """Raised when a fetched body cannot be written to its destination."""

    pass
