"""Dashboard screen that draws the state held by ``Dashboard``."""

from typing import Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import ContentSwitcher, DataTable, Header, Label, OptionList, Static
from textual.widgets.option_list import Option

from gitact.dashboard.messages import KeyPressed, Resized
from gitact.dashboard.model import Dashboard
from gitact.dashboard.views import TABLE_COLUMNS, ListEntry
from gitact.models import ViewMode
from gitact.screens.loading import LoadingPane

PANES = {
    ViewMode.repository_list: "item-view",
    ViewMode.activity_feed: "item-view",
    ViewMode.repository_table: "repo-table",
    ViewMode.statistics: "stats-view",
}


def entry_prompt(entry: ListEntry) -> Text:
    return Text.assemble((entry.title, "bold"), "\n", (entry.description, "dim"))


class DashboardScreen(Screen):
    """Header, notification bar, search bar, the active view and help.

    Until the first load finishes the views are replaced by a loading pane.

    Widgets never take focus: every key goes to ``Dashboard`` through the
    app, and the widgets only mirror its cursor positions.
    """

    AUTO_FOCUS = None

    CSS = """
    #dashboard-header {
        background: $primary;
        color: $text;
        padding: 0 1;
        height: 3;
    }
    #notification {
        padding: 0 1;
        display: none;
    }
    #notification.success {
        background: $success;
        color: $text;
    }
    #notification.error {
        background: $error;
        color: $text;
    }
    #search-bar {
        padding: 0 1;
        color: $text-muted;
        display: none;
    }
    #views {
        height: 1fr;
        margin: 0 1;
    }
    #list-title {
        text-style: bold;
        color: $accent;
        margin: 1 0 0 0;
    }
    #item-list {
        height: 1fr;
        border: none;
    }
    #stats-text {
        padding: 1 1;
    }
    #help-text {
        color: $text-muted;
        text-style: italic;
        padding: 0 1;
        height: auto;
    }
    """

    def __init__(self, dashboard: Dashboard, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.dashboard = dashboard
        self._rendered_items: Optional[list[ListEntry]] = None
        self._rendered_rows: Optional[list[tuple[str, ...]]] = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Static(id="dashboard-header")
        yield Static(id="notification")
        yield Static(id="search-bar")

        item_list = OptionList(id="item-list")
        table = DataTable(id="repo-table", cursor_type="row", zebra_stripes=True)
        stats = VerticalScroll(id="stats-view")
        for widget in (item_list, table, stats):
            widget.can_focus = False

        with ContentSwitcher(initial="loading-view", id="views"):
            yield LoadingPane(id="loading-view")
            with Vertical(id="item-view"):
                yield Label(id="list-title")
                yield item_list
            yield table
            with stats:
                yield Static(id="stats-text")
        yield Static(id="help-text")

    def on_mount(self) -> None:
        table = self.query_one("#repo-table", DataTable)
        for title, width in TABLE_COLUMNS:
            table.add_column(title, width=width)
        self.refresh_from_dashboard()

    # ── Input ─────────────────────────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.app.deliver(KeyPressed(key=event.key, character=event.character))  # type: ignore[attr-defined]

    def on_resize(self, event: events.Resize) -> None:
        self.app.deliver(Resized(width=event.size.width, height=event.size.height))  # type: ignore[attr-defined]

    # ── Rendering ─────────────────────────────────────────────────────────

    def refresh_from_dashboard(self) -> None:
        """Copy the dashboard's derived content into the widgets."""
        if not self.is_mounted:
            return
        d = self.dashboard

        self.query_one("#dashboard-header", Static).update(
            Text("\n".join(d.header_lines()))
        )

        bar = self.query_one("#notification", Static)
        current = d.notifications.current
        bar.display = current is not None
        if current is not None:
            bar.update(Text(current.message))
            bar.set_class(current.is_success, "success")
            bar.set_class(not current.is_success, "error")

        search_bar = self.query_one("#search-bar", Static)
        line = d.search_line()
        search_bar.display = line is not None
        if line is not None:
            search_bar.update(Text(line + "█"))

        switcher = self.query_one("#views", ContentSwitcher)
        if d.initial_loading:
            switcher.current = "loading-view"
            self.query_one(LoadingPane).update_status(d.loading_lines())
        else:
            switcher.current = PANES[d.view]
            self._draw_view()

        self.query_one("#help-text", Static).update(Text(d.help_text()))

    def _draw_view(self) -> None:
        d = self.dashboard
        if d.view in (ViewMode.repository_list, ViewMode.activity_feed):
            self._draw_items()
        elif d.view is ViewMode.repository_table:
            self._draw_table()
        else:
            self._draw_stats()

    def _draw_items(self) -> None:
        views = self.dashboard.views
        self.query_one("#list-title", Label).update(Text(views.title))
        option_list = self.query_one("#item-list", OptionList)
        items = views.items
        if items is not self._rendered_items:
            option_list.clear_options()
            option_list.add_options([Option(entry_prompt(e)) for e in items])
            self._rendered_items = items
        if items:
            option_list.highlighted = views.cursor

    def _draw_table(self) -> None:
        views = self.dashboard.views
        table = self.query_one("#repo-table", DataTable)
        rows = views.table_rows
        if rows is not self._rendered_rows:
            table.clear()
            table.add_rows(rows)
            self._rendered_rows = rows
        if views.table_height:
            table.styles.height = views.table_height
        if rows:
            table.move_cursor(row=views.cursor, animate=False)

    def _draw_stats(self) -> None:
        views = self.dashboard.views
        self.query_one("#stats-text", Static).update(Text(views.stats_text))
        self.query_one("#stats-view", VerticalScroll).scroll_to(
            y=views.cursor, animate=False
        )
