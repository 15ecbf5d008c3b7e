"""The dashboard: single owner of all interactive state.

``Dashboard.dispatch`` takes one message at a time, updates the state and
returns the effects (network fetches, clipboard, browser, timers) the
shell must run. Effect completions come back in as messages.
"""

import logging
from typing import Optional

from gitact.analysis.stats import compute_stats, summarize_repositories
from gitact.dashboard.loading import FetchSlot, LoadCoordinator
from gitact.dashboard.messages import (
    CopyToClipboard,
    Effect,
    EventsLoaded,
    FetchEvents,
    FetchRepositories,
    KeyPressed,
    LoadRequested,
    Message,
    NotificationExpired,
    NotificationPosted,
    OpenInBrowser,
    Quit,
    RepositoriesLoaded,
    Resized,
)
from gitact.dashboard.notifications import NOTIFICATION_SECONDS, NotificationLifecycle
from gitact.dashboard.search import SearchFilter
from gitact.dashboard.views import ViewStateMachine, WorkingSet
from gitact.errors import OSUnsupportedError
from gitact.formatting import format_number
from gitact.models import ViewMode

logger = logging.getLogger(__name__)

QUIT_KEYS = {"q", "escape", "ctrl+c"}
NEXT_VIEW_KEYS = {"tab", "right", "l"}
PREVIOUS_VIEW_KEYS = {"left", "h"}
CURSOR_KEYS = {"up": -1, "k": -1, "down": 1, "j": 1}
REPOSITORY_ACTION_KEYS = {"c", "x", "o"}

SHORT_HELP = "? toggle help • q quit"
FULL_HELP = "\n".join([
    "↑/k move up • ↓/j move down • ←/h previous view • →/l next view",
    "c copy clone command • x copy URL • o open in browser",
    "/ search • r refresh • tab switch view",
    "? toggle help • q quit",
])


def action_outcome(effect: Effect, error: Optional[Exception] = None) -> NotificationPosted:
    """Notification reporting how a clipboard or browser effect went."""
    if isinstance(effect, CopyToClipboard):
        if error is not None:
            return NotificationPosted(message=f"❌ Copy Error: {error}", is_success=False)
        return NotificationPosted(
            message=f"📋 {effect.description} copied: {effect.label}", is_success=True
        )
    if isinstance(effect, OpenInBrowser):
        if isinstance(error, OSUnsupportedError):
            return NotificationPosted(
                message="❌ OS not supported for opening browser", is_success=False
            )
        if error is not None:
            return NotificationPosted(
                message=f"❌ Error opening browser: {error}", is_success=False
            )
        return NotificationPosted(
            message=f"🌐 Opened in browser: {effect.label}", is_success=True
        )
    raise TypeError(f"{type(effect).__name__} has no user-visible outcome")


class Dashboard:
    """Composition root for loading, views, search and notifications."""

    def __init__(
        self,
        username: str,
        notification_seconds: float = NOTIFICATION_SECONDS,
    ) -> None:
        self.username = username
        self.data = WorkingSet()
        self.loader = LoadCoordinator()
        self.views = ViewStateMachine()
        self.search = SearchFilter()
        self.notifications = NotificationLifecycle(notification_seconds)
        self.show_help = False

    # ── Convenience state ─────────────────────────────────────────────────

    @property
    def ready(self) -> bool:
        return self.loader.ready

    @property
    def loading(self) -> bool:
        return self.loader.loading

    @property
    def initial_loading(self) -> bool:
        """True until the first load finished; reloads keep the dashboard shown."""
        return not self.loader.loaded_once

    @property
    def view(self) -> ViewMode:
        return self.views.mode

    # ── Reducer ───────────────────────────────────────────────────────────

    def dispatch(self, message: Message) -> list[Effect]:
        """Apply one message and return the effects it produced."""
        if isinstance(message, LoadRequested):
            return self._load()
        if isinstance(message, RepositoriesLoaded):
            return self._on_repositories(message)
        if isinstance(message, EventsLoaded):
            return self._on_events(message)
        if isinstance(message, KeyPressed):
            if self.search.active:
                return self._on_search_key(message)
            return self._on_key(message)
        if isinstance(message, Resized):
            self.views.resize(message.height, self.data)
            return []
        if isinstance(message, NotificationPosted):
            return [self.notifications.notify(message.message, message.is_success)]
        if isinstance(message, NotificationExpired):
            self.notifications.clear()
            return []
        raise TypeError(f"unsupported message: {type(message).__name__}")

    # ── Loading ───────────────────────────────────────────────────────────

    def _load(self) -> list[Effect]:
        epoch = self.loader.begin()
        logger.info("loading data for %s (epoch %d)", self.username, epoch)
        return [FetchRepositories(epoch=epoch), FetchEvents(epoch=epoch)]

    def _on_repositories(self, msg: RepositoriesLoaded) -> list[Effect]:
        if not self.loader.complete(FetchSlot.repositories, msg.epoch):
            return []
        if msg.error is not None:
            logger.warning("repositories failed to load: %s", msg.error)
            self.notifications.show(f"❌ Error loading repositories: {msg.error}")
        else:
            public = [r for r in msg.repositories if not r.private]
            self.data = self.data.model_copy(update={"repositories": public})
            self.views.show_repositories(public, self.search.query)
            self.views.rebuild_table(public)
            if self.views.mode is ViewMode.statistics:
                self.views.render_statistics(self.data)
        return []

    def _on_events(self, msg: EventsLoaded) -> list[Effect]:
        if not self.loader.complete(FetchSlot.events, msg.epoch):
            return []
        if msg.error is not None:
            logger.warning("activity failed to load: %s", msg.error)
            self.notifications.show(f"❌ Error loading activity: {msg.error}")
        else:
            self.data = self.data.model_copy(
                update={"events": list(msg.events), "stats": compute_stats(msg.events)}
            )
            self.views.show_activity(self.data.events)
            if self.views.mode is ViewMode.statistics:
                self.views.render_statistics(self.data)
        return []

    # ── Keys ──────────────────────────────────────────────────────────────

    def _on_key(self, msg: KeyPressed) -> list[Effect]:
        key = msg.key
        if key in QUIT_KEYS:
            return [Quit()]
        if key == "question_mark":
            self.show_help = not self.show_help
        elif key in NEXT_VIEW_KEYS:
            self._change_view(self.views.next)
        elif key in PREVIOUS_VIEW_KEYS:
            self._change_view(self.views.previous)
        elif key == "slash":
            if self.views.mode is ViewMode.repository_list:
                self.search.begin()
        elif key == "r":
            effects = self._load()
            effects.append(self.notifications.notify("🔄 Refreshing data...", True))
            return effects
        elif key in REPOSITORY_ACTION_KEYS:
            return self._repository_action(key)
        elif key in CURSOR_KEYS:
            self.views.move_cursor(CURSOR_KEYS[key])
        elif key == "pageup":
            self.views.page(-1)
        elif key == "pagedown":
            self.views.page(1)
        elif key == "home":
            self.views.move_to_start()
        elif key == "end":
            self.views.move_to_end()
        return []

    def _change_view(self, step) -> None:  # type: ignore[no-untyped-def]
        step(self.data)
        if self.views.mode is ViewMode.repository_list:
            # entering the list shows it unfiltered
            self.search.reset()

    def _repository_action(self, key: str) -> list[Effect]:
        repo = self.views.selected_repository
        if repo is None:
            return []
        if key == "c":
            return [CopyToClipboard(
                text=f"git clone {repo.clone_url}",
                label=repo.name,
                description="Clone command",
            )]
        if key == "x":
            return [CopyToClipboard(text=repo.url, label=repo.name, description="URL")]
        return [OpenInBrowser(url=repo.url, label=repo.name)]

    def _on_search_key(self, msg: KeyPressed) -> list[Effect]:
        if msg.key in ("escape", "ctrl+c"):
            self.search.cancel()
            self.views.show_repositories(self.data.repositories)
        elif msg.key == "enter":
            query = self.search.submit()
            self.views.show_repositories(self.data.repositories, query)
        elif msg.key == "backspace":
            self.search.backspace()
        elif msg.character and len(msg.character) == 1 and msg.character.isprintable():
            self.search.type(msg.character)
        return []

    # ── Render content ────────────────────────────────────────────────────

    def header_lines(self) -> list[str]:
        lines = [f"🐙 GitHub Dashboard - {self.username}"]
        if self.data.repositories:
            summary = summarize_repositories(self.data.repositories)
            lines.append(
                f"📊 {summary.total_repositories} repos • "
                f"⭐ {format_number(summary.total_stars)} stars • "
                f"🍴 {format_number(summary.total_forks)} forks"
            )
        else:
            lines.append("")
        label = self.views.mode.label
        if self.loading and not self.initial_loading:
            label += " • 🔄 Refreshing..."
        lines.append(label)
        return lines

    def loading_lines(self) -> list[str]:
        repos = (
            "✅ Repositories loaded" if self.loader.repositories_loaded
            else "⏳ Loading repositories..."
        )
        events = (
            "✅ Activity loaded" if self.loader.events_loaded
            else "⏳ Loading activity..."
        )
        return [f"Loading GitHub data for {self.username}...", "", repos, events]

    def search_line(self) -> Optional[str]:
        if not self.search.active:
            return None
        return f"Search: {self.search.buffer}"

    def help_text(self) -> str:
        return FULL_HELP if self.show_help else SHORT_HELP
