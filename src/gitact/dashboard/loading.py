"""Join of the two independent data fetches into one readiness gate."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class FetchSlot(str, Enum):
    repositories = "repositories"
    events = "events"


class LoadCoordinator:
    """Tracks which data sources have reported for the current load.

    A slot counts as loaded once its fetch finished, whether it succeeded
    or failed. Each load gets a new epoch; a completion from an older
    epoch belongs to a superseded load and is rejected. ``loaded_once``
    stays set after the first load finished, across later reloads.
    """

    def __init__(self) -> None:
        self.epoch = 0
        self.loading = False
        self.loaded_once = False
        self._loaded: dict[FetchSlot, bool] = {slot: False for slot in FetchSlot}

    def begin(self) -> int:
        """Start a (re)load: reset both slots and return the new epoch."""
        self.epoch += 1
        self.loading = True
        self._loaded = {slot: False for slot in FetchSlot}
        return self.epoch

    def complete(self, slot: FetchSlot, epoch: int) -> bool:
        """Mark ``slot`` loaded. Returns False for a stale completion."""
        if epoch != self.epoch:
            logger.debug(
                "dropping stale %s completion (epoch %d, current %d)",
                slot.value, epoch, self.epoch,
            )
            return False
        self._loaded[slot] = True
        if self.ready:
            self.loading = False
            self.loaded_once = True
        return True

    @property
    def repositories_loaded(self) -> bool:
        return self._loaded[FetchSlot.repositories]

    @property
    def events_loaded(self) -> bool:
        return self._loaded[FetchSlot.events]

    @property
    def ready(self) -> bool:
        return all(self._loaded.values())
