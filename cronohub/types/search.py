"""Issue search data models."""

from dataclasses import dataclass, field


@dataclass
class IssueHit:
    """The parts of a search result item the report pipeline uses."""

    number: int
    title: str
    html_url: str
    comments_url: str


@dataclass
class SearchResult:
    """One page of issue search results."""

    query: str
    total_count: int
    items: list[IssueHit] = field(default_factory=list)
    incomplete: bool = False  # more matches exist than the single page returned
