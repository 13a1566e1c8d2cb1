"""CronoHub exception classes."""

from datetime import datetime


class CronoHubError(Exception):
    """Base exception for all CronoHub errors."""

    def __init__(self, code: str, message: str, status_code: int | None = None) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}")


class ConfigurationError(CronoHubError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(CronoHubError):
    """Raised when input is rejected before any request is made."""

    def __init__(self, message: str) -> None:
        super().__init__("VALIDATION_ERROR", message)


class AuthenticationError(CronoHubError):
    """Raised when the token is rejected."""

    pass


class NotFoundError(CronoHubError):
    """Raised when a resource is not found."""

    pass


class ForbiddenError(CronoHubError):
    """Raised when access is denied (HTTP 403)."""

    pass


class RateLimitedError(ForbiddenError):
    """Raised when GitHub reports an exhausted rate limit. Never retried."""

    def __init__(
        self,
        message: str = "GitHub API rate limit exceeded. Please try again later.",
        status_code: int | None = 403,
        reset_at: datetime | None = None,
    ) -> None:
        super().__init__("RATE_LIMITED", message, status_code)
        self.reset_at = reset_at


class ReadOnlyAccessError(CronoHubError):
    """Raised when the token can read a repository but cannot push to it."""

    def __init__(self, message: str) -> None:
        super().__init__("READ_ONLY_ACCESS", message)


class NetworkError(CronoHubError):
    """Raised on transport-level failures (DNS, refused, reset, timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__("NETWORK_ERROR", message)


class ServerError(CronoHubError):
    """Raised on server errors (5xx) once retries are exhausted."""

    pass


class PartialFetchError(CronoHubError):
    """A single collaborator's report failed inside a multi-user report.

    Recorded in that user's slot of the report rather than raised.
    """

    def __init__(self, username: str, cause: Exception) -> None:
        if isinstance(cause, CronoHubError):
            message, status_code = cause.message, cause.status_code
        else:
            message, status_code = str(cause) or type(cause).__name__, None
        super().__init__("PARTIAL_FETCH_ERROR", message, status_code)
        self.username = username
        self.cause = cause
