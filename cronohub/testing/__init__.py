"""CronoHub testing utilities.

Provides a mock GitHub API and payload factories for testing code that uses
CronoHub.
"""

from cronohub.testing.fixtures import (
    BOGOTA,
    TOKYO,
    create_mock_comment,
    create_mock_issue,
    create_mock_member,
    create_mock_repository,
    create_time_comment,
)
from cronohub.testing.mock import MockCall, MockGitHubAPI, MockRoute

__all__ = [
    # Mock API
    "MockGitHubAPI",
    "MockRoute",
    "MockCall",
    # Payload factories
    "create_mock_issue",
    "create_mock_comment",
    "create_time_comment",
    "create_mock_member",
    "create_mock_repository",
    # Timezones
    "BOGOTA",
    "TOKYO",
]
