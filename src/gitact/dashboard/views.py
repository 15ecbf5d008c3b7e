"""The four dashboard views and the content each one presents."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gitact.analysis.activity import aggregate_by_repository
from gitact.analysis.stats import grade_for, summarize_repositories
from gitact.dashboard.search import filter_repositories
from gitact.formatting import describe_event, event_icon, format_number, truncate
from gitact.models import AggregateStats, Event, RepositoryRecord, ViewMode

LIST_CHROME_ROWS = 10  # header, notification, search bar, help
TABLE_CHROME_ROWS = 8
TOP_REPOSITORIES = 5

TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 25),
    ("Stars", 8),
    ("Forks", 8),
    ("Language", 12),
    ("Updated", 12),
]


class WorkingSet(BaseModel):
    """The data the views are derived from; replaced as a whole."""

    model_config = ConfigDict(frozen=True)

    repositories: list[RepositoryRecord] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
    stats: AggregateStats = Field(default_factory=AggregateStats)


class ListEntry(BaseModel):
    """One row of the repository list or the activity feed."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    repository: Optional[RepositoryRecord] = None
    event: Optional[Event] = None


def repository_entry(repo: RepositoryRecord) -> ListEntry:
    desc = truncate(repo.description or "No description", 80)
    return ListEntry(
        title=f"{repo.name} ⭐ {format_number(repo.stars)}",
        description=f"🍴 {format_number(repo.forks)} • {desc}",
        repository=repo,
    )


def activity_entry(event: Event) -> ListEntry:
    return ListEntry(
        title=f"{event_icon(event)} {describe_event(event)}",
        description=f"{event.created_at:%Y-%m-%d %H:%M}",
        event=event,
    )


def table_row(repo: RepositoryRecord) -> tuple[str, ...]:
    return (
        repo.name,
        format_number(repo.stars),
        format_number(repo.forks),
        repo.language or "-",
        f"{repo.updated_at:%Y-%m-%d}",
    )


def render_detailed_stats(data: WorkingSet) -> str:
    """Plain-text body of the statistics view."""
    lines = ["📊 Detailed Statistics", ""]

    if data.repositories:
        summary = summarize_repositories(data.repositories)
        lines += [
            "🗂️ Repository Overview:",
            f"   Total Repositories: {summary.total_repositories}",
            f"   Total Stars: {format_number(summary.total_stars)}",
            f"   Total Forks: {format_number(summary.total_forks)}",
            f"   Average Stars: {summary.average_stars:.1f}",
            "",
            "🏆 Top Repositories by Stars:",
        ]
        for i, repo in enumerate(data.repositories[:TOP_REPOSITORIES], start=1):
            lines.append(f"   {i}. {repo.name} - ⭐ {format_number(repo.stars)}")
        lines.append("")

        if summary.languages:
            lines.append("💻 Programming Languages:")
            for lang, count in sorted(
                summary.languages.items(), key=lambda kv: (-kv[1], kv[0])
            ):
                lines.append(f"   {lang}: {count} repositories")
            lines.append("")

    if data.events:
        s = data.stats
        lines += [
            "⚡ Activity Statistics:",
            f"   Push Events: {s.push}",
            f"   Pull Request Events: {s.pull_request}",
            f"   Issue Events: {s.issues}",
            f"   Create Events: {s.create}",
            f"   Watch Events: {s.watch}",
            f"   Total Events: {s.total}",
            f"   Activity Grade: {grade_for(s).value}",
            "",
            "🔥 Most Active Repositories:",
        ]
        for i, activity in enumerate(
            aggregate_by_repository(data.events)[:TOP_REPOSITORIES], start=1
        ):
            lines.append(
                f"   {i}. {activity.name} - {activity.count} events "
                f"(last {activity.last_activity:%Y-%m-%d})"
            )

    return "\n".join(lines)


class ViewStateMachine:
    """Active view, the per-view item lists, and a cursor per view.

    The repository list and activity feed are rebuilt when their view is
    entered and whenever the data they come from is replaced. The table
    is rebuilt when the repositories or the display height change.
    """

    def __init__(self) -> None:
        self.mode = ViewMode.repository_list
        self.height = 0
        self.repository_title = "Loading..."
        self.repository_items: list[ListEntry] = []
        self.activity_title = "Loading..."
        self.activity_items: list[ListEntry] = []
        self.table_rows: list[tuple[str, ...]] = []
        self._table_repositories: list[RepositoryRecord] = []
        self.stats_text = ""
        self._cursor: dict[ViewMode, int] = {mode: 0 for mode in ViewMode}

    # ── Transitions ───────────────────────────────────────────────────────

    def next(self, data: WorkingSet) -> ViewMode:
        return self.enter(self.mode.next(), data)

    def previous(self, data: WorkingSet) -> ViewMode:
        return self.enter(self.mode.previous(), data)

    def enter(self, mode: ViewMode, data: WorkingSet) -> ViewMode:
        self.mode = mode
        if mode is ViewMode.repository_list:
            self.show_repositories(data.repositories)
        elif mode is ViewMode.activity_feed:
            self.show_activity(data.events)
        elif mode is ViewMode.statistics:
            self.render_statistics(data)
        return mode

    # ── Rebuilds ──────────────────────────────────────────────────────────

    def show_repositories(self, repos: list[RepositoryRecord], query: str = "") -> None:
        matches = filter_repositories(repos, query)
        self.repository_items = [repository_entry(r) for r in matches]
        if query:
            self.repository_title = (
                f"📁 Repositories matching '{query}' ({len(matches)})"
            )
        else:
            self.repository_title = f"📁 Public Repositories ({len(matches)})"
        self._clamp(ViewMode.repository_list)

    def show_activity(self, events: list[Event]) -> None:
        self.activity_items = [activity_entry(e) for e in events]
        self.activity_title = f"⚡ Recent Activity ({len(events)} events)"
        self._clamp(ViewMode.activity_feed)

    def rebuild_table(self, repos: list[RepositoryRecord]) -> None:
        self._table_repositories = list(repos)
        self.table_rows = [table_row(r) for r in repos]
        self._clamp(ViewMode.repository_table)

    def render_statistics(self, data: WorkingSet) -> None:
        self.stats_text = render_detailed_stats(data)
        self._clamp(ViewMode.statistics)

    def resize(self, height: int, data: WorkingSet) -> None:
        self.height = height
        self.rebuild_table(data.repositories)
        self._clamp(ViewMode.statistics)

    # ── Derived content ───────────────────────────────────────────────────

    @property
    def list_height(self) -> int:
        return max(self.height - LIST_CHROME_ROWS, 0)

    @property
    def table_height(self) -> int:
        return max(self.height - TABLE_CHROME_ROWS, 0)

    @property
    def title(self) -> str:
        if self.mode is ViewMode.activity_feed:
            return self.activity_title
        if self.mode is ViewMode.repository_list:
            return self.repository_title
        return ""

    @property
    def items(self) -> list[ListEntry]:
        """Entries of the active list-style view, empty for the others."""
        if self.mode is ViewMode.repository_list:
            return self.repository_items
        if self.mode is ViewMode.activity_feed:
            return self.activity_items
        return []

    @property
    def cursor(self) -> int:
        return self._cursor[self.mode]

    @property
    def selected_repository(self) -> Optional[RepositoryRecord]:
        if self.mode is ViewMode.repository_list and self.repository_items:
            return self.repository_items[self.cursor].repository
        if self.mode is ViewMode.repository_table and self._table_repositories:
            return self._table_repositories[self.cursor]
        return None

    # ── Cursor movement ───────────────────────────────────────────────────

    def move_cursor(self, delta: int) -> None:
        self._cursor[self.mode] += delta
        self._clamp(self.mode)

    def page(self, direction: int) -> None:
        if self.mode is ViewMode.repository_table:
            step = self.table_height
        else:
            step = self.list_height
        self.move_cursor(direction * max(step, 1))

    def move_to_start(self) -> None:
        self._cursor[self.mode] = 0

    def move_to_end(self) -> None:
        self._cursor[self.mode] = self._extent(self.mode)

    def _extent(self, mode: ViewMode) -> int:
        """Largest valid cursor value for ``mode``."""
        if mode is ViewMode.repository_list:
            return max(len(self.repository_items) - 1, 0)
        if mode is ViewMode.activity_feed:
            return max(len(self.activity_items) - 1, 0)
        if mode is ViewMode.repository_table:
            return max(len(self.table_rows) - 1, 0)
        lines = self.stats_text.count("\n") + 1 if self.stats_text else 0
        return max(lines - max(self.list_height, 1), 0)

    def _clamp(self, mode: ViewMode) -> None:
        self._cursor[mode] = min(max(self._cursor[mode], 0), self._extent(mode))
