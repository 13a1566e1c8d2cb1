"""
Search query construction and issue reference parsing.

GitHub's issue search cannot filter on *comment* creation date, only on the
issue's ``updated`` timestamp. Reports therefore search a proxy window: issues
the user commented on, inside the org or repository, containing the
time-tracking marker text, and updated within the requested range. Exact
comment timestamps are checked afterwards against each issue's comments.

The proxy can miss an entry when its issue was updated again later and its
``updated`` timestamp left the window. That trade-off is accepted.
"""

import re
from datetime import date
from urllib.parse import parse_qs, unquote, urlsplit

from cronohub.codec import SEARCH_KEYWORD
from cronohub.dates import parse_calendar_date
from cronohub.types.repos import IssueRef

_ISSUE_PATH = re.compile(r"/([^/]+)/([^/]+)/issues/(\d+)")


def build_search_query(
    username: str,
    org: str,
    start: "str | date",
    end: "str | date",
    repo: str | None = None,
    keyword: str = SEARCH_KEYWORD,
) -> str:
    """
    Build the issue search query for one user's time entries.

    Args:
        username: Commenter to search for
        org: Organization (or owning user) name
        start: First day of the window
        end: Last day of the window
        repo: Restrict to ``org/repo`` instead of the whole organization
        keyword: Marker text every candidate issue must contain

    Returns:
        Query string for ``GET /search/issues``
    """
    scope = f"repo:{org}/{repo}" if repo else f"org:{org}"
    window = f"{parse_calendar_date(start).isoformat()}..{parse_calendar_date(end).isoformat()}"
    return f"type:issue commenter:{username} {scope} {keyword} updated:{window}"


def parse_issue_url(url: str) -> IssueRef | None:
    """
    Extract the issue a GitHub page refers to.

    Recognises ``/{owner}/{repo}/issues/{number}`` paths and the project
    side-pane parameter ``?issue=owner|repo|number``.
    """
    parts = urlsplit(url)

    match = _ISSUE_PATH.search(parts.path)
    if match:
        return IssueRef(owner=match.group(1), repo=match.group(2), number=int(match.group(3)))

    pane = parse_qs(parts.query).get("issue")
    if pane:
        fields = unquote(pane[0]).split("|")
        if len(fields) >= 3 and fields[2].isdigit():
            return IssueRef(owner=fields[0], repo=fields[1], number=int(fields[2]))

    return None
