"""Data models for gitact."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── GitHub events ─────────────────────────────────────────────────────────

class EventKind(str, Enum):
    """Kind tag of a GitHub activity event."""

    push = "PushEvent"
    issues = "IssuesEvent"
    watch = "WatchEvent"
    fork = "ForkEvent"
    create = "CreateEvent"
    delete = "DeleteEvent"
    pull_request = "PullRequestEvent"
    release = "ReleaseEvent"
    public = "PublicEvent"
    other = "other"

    @classmethod
    def from_type(cls, raw: str) -> "EventKind":
        """Map the API ``type`` string to a kind, ``other`` when unknown."""
        try:
            kind = cls(raw)
        except ValueError:
            return cls.other
        return kind


class Event(BaseModel):
    """One GitHub activity item, as returned by the events API."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    type: str  # raw API type, e.g. "IssueCommentEvent"
    repo_name: str
    repo_url: str = ""
    created_at: datetime
    actor: str = ""
    action: str = ""
    ref_type: str = ""
    ref: str = ""
    commit_count: int = 0
    title: str = ""  # issue or pull request title, when present


# ── Repositories ──────────────────────────────────────────────────────────

class RepositoryRecord(BaseModel):
    """Metadata snapshot of one repository."""

    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str
    description: str = ""
    url: str
    clone_url: str
    stars: int = 0
    forks: int = 0
    language: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    private: bool = False


class RepoActivity(BaseModel):
    """Activity counted per repository over an event batch."""

    model_config = ConfigDict(frozen=True)

    name: str
    count: int
    last_activity: datetime
    url: str
    clone_url: str


class RepositorySummary(BaseModel):
    """Totals over a repository set."""

    total_repositories: int = 0
    total_stars: int = 0
    total_forks: int = 0
    average_stars: float = 0.0
    average_forks: float = 0.0
    most_starred: Optional[RepositoryRecord] = None
    most_forked: Optional[RepositoryRecord] = None
    languages: dict[str, int] = Field(default_factory=dict)


class RateLimitStatus(BaseModel):
    """Core rate limit as reported by ``/rate_limit``."""

    limit: int
    remaining: int
    reset_at: datetime


# ── Derived statistics ───────────────────────────────────────────────────

class AggregateStats(BaseModel):
    """Counts of events by kind over one batch.

    Always rebuilt as a whole by ``compute_stats``; never edited in place.
    """

    model_config = ConfigDict(frozen=True)

    push: int = 0
    issues: int = 0
    watch: int = 0
    fork: int = 0
    create: int = 0
    delete: int = 0
    pull_request: int = 0
    release: int = 0
    public: int = 0
    other: int = 0
    total: int = 0


class Grade(str, Enum):
    """Ordinal activity grade, lowest first."""

    f = "F"
    d = "D"
    c = "C"
    b = "B"
    b_plus = "B+"
    a = "A"
    a_plus = "A+"
    s = "S"
    s_plus = "S+"


# ── Dashboard state values ───────────────────────────────────────────────

class ViewMode(str, Enum):
    """The active presentation mode of the dashboard."""

    repository_list = "repository_list"
    repository_table = "repository_table"
    statistics = "statistics"
    activity_feed = "activity_feed"

    def next(self) -> "ViewMode":
        ring = list(ViewMode)
        return ring[(ring.index(self) + 1) % len(ring)]

    def previous(self) -> "ViewMode":
        ring = list(ViewMode)
        return ring[(ring.index(self) - 1) % len(ring)]

    @property
    def label(self) -> str:
        labels = {
            ViewMode.repository_list: "📋 List View",
            ViewMode.repository_table: "📊 Table View",
            ViewMode.statistics: "📈 Statistics",
            ViewMode.activity_feed: "⚡ Activity",
        }
        return labels[self]


class Notification(BaseModel):
    """Transient status message shown after a side effect."""

    model_config = ConfigDict(frozen=True)

    message: str
    is_success: bool = True
    persistent: bool = False  # not cleared by the expiry timer
