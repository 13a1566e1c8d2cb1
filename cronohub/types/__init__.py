"""CronoHub type definitions.

This module exports all data model types used by the package.
"""

from cronohub.types.reports import AggregatedReport, MultiUserReport, TimeEntry, UserReport
from cronohub.types.repos import Collaborator, IssueRef, LoggedTime, PermissionResult, User
from cronohub.types.search import IssueHit, SearchResult

__all__ = [
    # Report types
    "TimeEntry",
    "AggregatedReport",
    "UserReport",
    "MultiUserReport",
    # Repository and user types
    "Collaborator",
    "User",
    "IssueRef",
    "LoggedTime",
    "PermissionResult",
    # Search types
    "IssueHit",
    "SearchResult",
]
