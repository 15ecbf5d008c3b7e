"""Messages consumed by the dashboard and effects it asks the shell to run.

Both are immutable: a message describes something that happened, an effect
describes I/O the dashboard wants performed. Neither carries behavior.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from gitact.models import Event, RepositoryRecord


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Messages ──────────────────────────────────────────────────────────────

class LoadRequested(_Frozen):
    """Initial load of both data sources."""


class RepositoriesLoaded(_Frozen):
    epoch: int
    repositories: list[RepositoryRecord] = []
    error: Optional[str] = None


class EventsLoaded(_Frozen):
    epoch: int
    events: list[Event] = []
    error: Optional[str] = None


class KeyPressed(_Frozen):
    key: str
    character: Optional[str] = None


class Resized(_Frozen):
    width: int
    height: int


class NotificationPosted(_Frozen):
    message: str
    is_success: bool = True


class NotificationExpired(_Frozen):
    """The notification timer fired."""


Message = Union[
    LoadRequested,
    RepositoriesLoaded,
    EventsLoaded,
    KeyPressed,
    Resized,
    NotificationPosted,
    NotificationExpired,
]


# ── Effects ───────────────────────────────────────────────────────────────

class FetchRepositories(_Frozen):
    epoch: int


class FetchEvents(_Frozen):
    epoch: int


class CopyToClipboard(_Frozen):
    text: str
    label: str
    description: str  # what was copied, e.g. "Clone command"


class OpenInBrowser(_Frozen):
    url: str
    label: str


class ScheduleNotificationClear(_Frozen):
    delay: float


class Quit(_Frozen):
    pass


Effect = Union[
    FetchRepositories,
    FetchEvents,
    CopyToClipboard,
    OpenInBrowser,
    ScheduleNotificationClear,
    Quit,
]
