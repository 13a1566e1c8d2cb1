"""CronoHub - GitHub time tracking reports for Python."""

from cronohub.aggregate import aggregate, group_by_date, total_hours
from cronohub.async_client import AsyncCronoHubClient
from cronohub.async_transport import AsyncHTTPTransport, RetryConfig
from cronohub.codec import decode_hours, format_time_comment, validate_hours
from cronohub.dates import (
    DateRangeResult,
    TimezoneNormalizer,
    default_date_range,
    format_date,
    validate_date_range,
)
from cronohub.exceptions import (
    AuthenticationError,
    ConfigurationError,
    CronoHubError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    PartialFetchError,
    RateLimitedError,
    ReadOnlyAccessError,
    ServerError,
    ValidationError,
)
from cronohub.logging import configure_logging, get_logger
from cronohub.query import build_search_query, parse_issue_url
from cronohub.types import (
    AggregatedReport,
    Collaborator,
    IssueRef,
    LoggedTime,
    MultiUserReport,
    PermissionResult,
    TimeEntry,
    User,
    UserReport,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "AsyncCronoHubClient",
    # Exceptions
    "CronoHubError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ForbiddenError",
    "RateLimitedError",
    "ReadOnlyAccessError",
    "NetworkError",
    "ServerError",
    "PartialFetchError",
    # Dates
    "DateRangeResult",
    "TimezoneNormalizer",
    "validate_date_range",
    "default_date_range",
    "format_date",
    # Comment format
    "decode_hours",
    "format_time_comment",
    "validate_hours",
    # Queries
    "build_search_query",
    "parse_issue_url",
    # Aggregation
    "aggregate",
    "group_by_date",
    "total_hours",
    # Types
    "TimeEntry",
    "AggregatedReport",
    "UserReport",
    "MultiUserReport",
    "Collaborator",
    "User",
    "IssueRef",
    "LoggedTime",
    "PermissionResult",
    # Transport
    "AsyncHTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
