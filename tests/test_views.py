"""Tests for the view state machine and view content."""

import pytest

from gitact.analysis.stats import compute_stats
from gitact.dashboard.views import (
    LIST_CHROME_ROWS,
    TABLE_CHROME_ROWS,
    ViewStateMachine,
    WorkingSet,
    activity_entry,
    render_detailed_stats,
    repository_entry,
    table_row,
)
from gitact.models import ViewMode

from factories import make_event, make_repo


@pytest.fixture
def data(sample_repos, sample_events):
    return WorkingSet(
        repositories=sample_repos,
        events=sample_events,
        stats=compute_stats(sample_events),
    )


class TestEntries:
    def test_repository_entry(self):
        entry = repository_entry(make_repo("big", stars=1500, forks=2, description="Cool"))
        assert entry.title == "big ⭐ 1.5k"
        assert entry.description == "🍴 2 • Cool"
        assert entry.repository.name == "big"

    def test_repository_entry_without_description(self):
        entry = repository_entry(make_repo("bare"))
        assert entry.description.endswith("No description")

    def test_activity_entry(self):
        entry = activity_entry(make_event("WatchEvent", "o/r"))
        assert entry.title == "☆ Starred o/r"
        assert entry.description == "2025-01-15 12:00"

    def test_table_row(self):
        row = table_row(make_repo("x", stars=3, forks=4))
        assert row == ("x", "3", "4", "-", "2025-01-15")


class TestTransitions:
    def test_starts_on_list(self):
        assert ViewStateMachine().mode is ViewMode.repository_list

    def test_next_cycles_through_four(self, data):
        views = ViewStateMachine()
        seen = [views.next(data) for _ in range(4)]
        assert seen == [
            ViewMode.repository_table,
            ViewMode.statistics,
            ViewMode.activity_feed,
            ViewMode.repository_list,
        ]

    def test_previous_goes_back(self, data):
        views = ViewStateMachine()
        assert views.previous(data) is ViewMode.activity_feed
        assert views.previous(data) is ViewMode.statistics

    def test_entering_activity_builds_feed(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.activity_feed, data)
        assert len(views.items) == len(data.events)
        assert views.title == "⚡ Recent Activity (6 events)"

    def test_entering_list_builds_repositories(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, data)
        assert views.title == "📁 Public Repositories (3)"
        assert [e.repository.name for e in views.items] == [r.name for r in data.repositories]

    def test_views_keep_separate_items(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, data)
        views.show_activity(data.events)
        assert len(views.repository_items) == 3
        assert len(views.activity_items) == 6

    def test_entering_statistics_renders(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.statistics, data)
        assert "📊 Detailed Statistics" in views.stats_text
        assert views.items == []
        assert views.title == ""


class TestRebuilds:
    def test_filtered_title(self, sample_repos):
        views = ViewStateMachine()
        views.show_repositories(sample_repos, "fork")
        assert views.title == "📁 Repositories matching 'fork' (1)"
        assert views.items[0].repository.name == "spoon-knife"

    def test_resize_sets_heights(self, data):
        views = ViewStateMachine()
        views.resize(30, data)
        assert views.table_height == 30 - TABLE_CHROME_ROWS
        assert views.list_height == 30 - LIST_CHROME_ROWS
        assert len(views.table_rows) == 3

    def test_small_terminal_heights_floor_at_zero(self, data):
        views = ViewStateMachine()
        views.resize(4, data)
        assert views.table_height == 0
        assert views.list_height == 0


class TestCursor:
    def test_clamped_to_items(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, data)
        views.move_cursor(-1)
        assert views.cursor == 0
        views.move_cursor(10)
        assert views.cursor == 2
        views.move_to_start()
        assert views.cursor == 0
        views.move_to_end()
        assert views.cursor == 2

    def test_cursor_per_view(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, data)
        views.move_cursor(1)
        views.enter(ViewMode.activity_feed, data)
        views.move_cursor(3)
        assert views.cursor == 3
        views.enter(ViewMode.repository_list, data)
        assert views.cursor == 1

    def test_shrinking_list_clamps_cursor(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, data)
        views.move_to_end()
        views.show_repositories(data.repositories, "linguist")
        assert views.cursor == 0

    def test_page_moves_by_visible_rows(self, sample_events):
        events = sample_events * 10
        data = WorkingSet(events=events, stats=compute_stats(events))
        views = ViewStateMachine()
        views.resize(LIST_CHROME_ROWS + 5, data)
        views.enter(ViewMode.activity_feed, data)
        views.page(1)
        assert views.cursor == 5
        views.page(-1)
        assert views.cursor == 0

    def test_selected_repository_in_list_and_table(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, data)
        views.move_cursor(1)
        assert views.selected_repository.name == "hello-world"

        views.rebuild_table(data.repositories)
        views.enter(ViewMode.repository_table, data)
        views.move_to_end()
        assert views.selected_repository.name == "spoon-knife"

    def test_no_selection_elsewhere(self, data):
        views = ViewStateMachine()
        views.enter(ViewMode.activity_feed, data)
        assert views.selected_repository is None
        views.enter(ViewMode.statistics, data)
        assert views.selected_repository is None

    def test_no_selection_when_empty(self):
        views = ViewStateMachine()
        views.enter(ViewMode.repository_list, WorkingSet())
        assert views.selected_repository is None


class TestDetailedStats:
    def test_sections(self, data):
        text = render_detailed_stats(data)
        assert "Total Repositories: 3" in text
        assert "1. linguist - ⭐ 1.2k" in text
        assert "Ruby: 1 repositories" in text
        assert "Push Events: 3" in text
        assert "Total Events: 6" in text
        assert "Activity Grade: C" in text
        assert "1. octocat/linguist - 3 events" in text

    def test_empty(self):
        assert render_detailed_stats(WorkingSet()) == "📊 Detailed Statistics\n"
