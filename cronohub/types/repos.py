"""Repository, user and access data models."""

from dataclasses import dataclass

from cronohub.exceptions import (
    CronoHubError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    ReadOnlyAccessError,
)


@dataclass
class Collaborator:
    """Organization member considered for a multi-user report."""

    login: str
    avatar_url: str


@dataclass
class User:
    """The authenticated GitHub user."""

    login: str
    name: str
    avatar_url: str | None


@dataclass
class IssueRef:
    """Reference to a single issue."""

    owner: str
    repo: str
    number: int


@dataclass
class LoggedTime:
    """Result of posting a time-tracking comment."""

    comment_id: int
    url: str
    hours: float
    body: str


@dataclass
class PermissionResult:
    """Outcome of a repository write-access check.

    Expected failures are returned here rather than raised.
    """

    has_access: bool
    error: str | None = None
    reason: str | None = None  # "network", "not_found", "forbidden", "http_error", "read_only"
    status_code: int | None = None

    def raise_for_access(self) -> None:
        """Raise the exception matching a denied result; no-op when granted."""
        if self.has_access:
            return

        message = self.error or "Access denied"
        if self.reason == "network":
            raise NetworkError(message)
        if self.reason == "not_found":
            raise NotFoundError("NOT_FOUND", message, self.status_code)
        if self.reason == "forbidden":
            raise ForbiddenError("FORBIDDEN", message, self.status_code)
        if self.reason == "read_only":
            raise ReadOnlyAccessError(message)
        raise CronoHubError("HTTP_ERROR", message, self.status_code)
