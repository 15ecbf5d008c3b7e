"""Loading pane showing which data sources have reported."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import LoadingIndicator, Static


class LoadingPane(Vertical):
    """Shown in place of the views until the first load has finished."""

    DEFAULT_CSS = """
    LoadingPane {
        align: center middle;
    }
    #loading-container {
        width: 60;
        height: auto;
        padding: 2 4;
        border: round $primary;
        background: $surface;
    }
    #loading-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    #loading-indicator {
        height: 1;
        margin-bottom: 1;
    }
    #status-label {
        text-align: center;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="loading-container"):
            yield Static("🐙  gitact", id="loading-title")
            yield LoadingIndicator(id="loading-indicator")
            yield Static(id="status-label")

    def update_status(self, lines: list[str]) -> None:
        """Replace the per-source progress lines."""
        self.query_one("#status-label", Static).update(Text("\n".join(lines)))
