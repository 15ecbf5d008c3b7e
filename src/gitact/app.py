"""Main Textual TUI application for gitact.

The app is the shell around ``Dashboard``: it turns terminal input into
messages, runs the effects the dashboard returns and redraws afterwards.
"""

import logging
from functools import partial
from typing import Optional

from textual.app import App

from gitact.actions import copy_to_clipboard, open_url
from gitact.config import Settings, load_settings
from gitact.dashboard.messages import (
    CopyToClipboard,
    Effect,
    EventsLoaded,
    FetchEvents,
    FetchRepositories,
    LoadRequested,
    Message,
    NotificationExpired,
    OpenInBrowser,
    Quit,
    RepositoriesLoaded,
    ScheduleNotificationClear,
)
from gitact.dashboard.model import Dashboard, action_outcome
from gitact.errors import ActionError, FetchError
from gitact.fetcher import GitHubFetcher
from gitact.screens.dashboard import DashboardScreen

logger = logging.getLogger(__name__)


class GitActApp(App):
    """Interactive dashboard for one GitHub user."""

    TITLE = "gitact"
    SUB_TITLE = "Repositories · Table · Statistics · Activity"

    CSS = """
    Screen {
        background: $background;
    }
    """

    def __init__(
        self,
        username: str,
        fetcher: Optional[GitHubFetcher] = None,
        settings: Optional[Settings] = None,
        **kwargs,  # type: ignore[no-untyped-def]
    ) -> None:
        super().__init__(**kwargs)
        self.settings = settings or load_settings()
        self.fetcher = fetcher or GitHubFetcher(
            token=self.settings.github_token,
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout_seconds,
        )
        self.dashboard = Dashboard(
            username, notification_seconds=self.settings.notification_seconds
        )
        self.sub_title = f"@{username}"
        self._dashboard_screen = DashboardScreen(self.dashboard)

    def on_mount(self) -> None:
        self.push_screen(self._dashboard_screen)
        self.deliver(LoadRequested())

    async def on_unmount(self) -> None:
        await self.fetcher.close()

    # ── Message loop ──────────────────────────────────────────────────────

    def deliver(self, message: Message) -> None:
        """Feed one message to the dashboard, run its effects, redraw."""
        for effect in self.dashboard.dispatch(message):
            self._run_effect(effect)
        self._dashboard_screen.refresh_from_dashboard()

    def _run_effect(self, effect: Effect) -> None:
        if isinstance(effect, FetchRepositories):
            self.run_worker(self._load_repositories(effect.epoch), group="fetch")
        elif isinstance(effect, FetchEvents):
            self.run_worker(self._load_events(effect.epoch), group="fetch")
        elif isinstance(effect, (CopyToClipboard, OpenInBrowser)):
            self.run_worker(
                partial(self._perform_action, effect), thread=True, group="actions"
            )
        elif isinstance(effect, ScheduleNotificationClear):
            self.set_timer(effect.delay, self._expire_notification)
        elif isinstance(effect, Quit):
            self.exit()

    async def _load_repositories(self, epoch: int) -> None:
        username = self.dashboard.username
        try:
            repos = await self.fetcher.fetch_public_repositories(
                username, max_pages=self.settings.max_repo_pages
            )
        except FetchError as e:
            self.deliver(RepositoriesLoaded(epoch=epoch, error=str(e)))
        except Exception as e:
            logger.exception("unexpected error loading repositories for %s", username)
            self.deliver(RepositoriesLoaded(epoch=epoch, error=f"unexpected error: {e}"))
        else:
            self.deliver(RepositoriesLoaded(epoch=epoch, repositories=repos))

    async def _load_events(self, epoch: int) -> None:
        username = self.dashboard.username
        try:
            events = await self.fetcher.fetch_events(username)
        except FetchError as e:
            self.deliver(EventsLoaded(epoch=epoch, error=str(e)))
        except Exception as e:
            logger.exception("unexpected error loading events for %s", username)
            self.deliver(EventsLoaded(epoch=epoch, error=f"unexpected error: {e}"))
        else:
            self.deliver(EventsLoaded(epoch=epoch, events=events))

    def _perform_action(self, effect: Effect) -> None:
        """Run a clipboard/browser effect on a worker thread."""
        error: Optional[Exception] = None
        try:
            if isinstance(effect, CopyToClipboard):
                copy_to_clipboard(effect.text)
            elif isinstance(effect, OpenInBrowser):
                open_url(effect.url)
        except ActionError as e:
            logger.warning("action %s failed: %s", type(effect).__name__, e)
            error = e
        except Exception as e:
            logger.exception("unexpected error running %s", type(effect).__name__)
            error = e
        self.call_from_thread(self.deliver, action_outcome(effect, error))

    def _expire_notification(self) -> None:
        self.deliver(NotificationExpired())
