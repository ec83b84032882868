"""Confirmation gate for favorite toggles started from the catalog.

A toggle requested while browsing the catalog is not applied right away: it
opens a pending confirmation (the "Add this plant to favorites?" modal).
``confirm`` commits it through the FavoritesStore, ``cancel`` drops it.
Removal from the favorites list itself goes straight to
``FavoritesStore.remove_favorite`` and never passes through here.
"""
import logging
from collections import OrderedDict
from threading import Lock
from uuid import uuid4

from flora.domain.Favorites import FavoritesCollection
from flora.domain.Plant import PlantRecord
from flora.domain.errors import PendingNotFound
from flora.infra.Favorites_Repository import FavoritesStore
from flora.utilities.constants import CONFIRM_ADD_PROMPT, CONFIRM_REMOVE_PROMPT, MAX_PENDING

logger = logging.getLogger(__name__)


class PendingToggle:
    def __init__(self, token: str, plant: PlantRecord, action: str):
        self.token = token
        self.plant = plant
        self.action = action  # "add" or "remove", as seen when requested

    @property
    def prompt(self) -> str:
        return CONFIRM_REMOVE_PROMPT if self.action == "remove" else CONFIRM_ADD_PROMPT

    def to_dict(self):
        return {
            "token": self.token,
            "action": self.action,
            "prompt": self.prompt,
            "plant": self.plant.to_dict(),
        }


class ConfirmationGate:
    def __init__(self, store: FavoritesStore, max_pending: int = MAX_PENDING):
        self.store = store
        self.max_pending = max_pending
        self._pending: "OrderedDict[str, PendingToggle]" = OrderedDict()
        self._lock = Lock()

    def request_toggle(self, plant: PlantRecord) -> PendingToggle:
        action = "remove" if self.store.load().is_favorite(plant.id) else "add"
        pending = PendingToggle(uuid4().hex, plant, action)
        with self._lock:
            self._pending[pending.token] = pending
            # Abandoned modals never answer; forget the oldest ones
            while len(self._pending) > self.max_pending:
                dropped = self._pending.popitem(last=False)[1]
                logger.debug(f"Dropped unanswered confirmation {dropped.token}")
        logger.debug(f"Pending {action} for plant {plant.id}: {pending.token}")
        return pending

    def _take(self, token: str) -> PendingToggle:
        with self._lock:
            pending = self._pending.pop(token, None)
        if pending is None:
            raise PendingNotFound("No pending favorite change to confirm")
        return pending

    def confirm(self, token: str) -> FavoritesCollection:
        """Commit the toggle against the current stored favorites. StorageWriteError propagates."""
        pending = self._take(token)
        return self.store.toggle_favorite(pending.plant)

    def cancel(self, token: str) -> None:
        pending = self._take(token)
        logger.debug(f"Pending {pending.action} for plant {pending.plant.id} cancelled")

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)
