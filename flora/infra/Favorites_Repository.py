"""Favorites repository: read-through load and full-overwrite persist under the ``favorites`` key."""
import json
import logging
from threading import RLock

from flora.domain.Favorites import FavoritesCollection
from flora.domain.Plant import PlantId, PlantRecord
from flora.domain.errors import StorageWriteError
from flora.infra.Key_Value_Store import KeyValueStore
from flora.utilities.constants import FAVORITES_KEY

logger = logging.getLogger(__name__)


class FavoritesStore:
    def __init__(self, storage: KeyValueStore, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key
        # One read-modify-write at a time per store
        self._lock = RLock()

    def load(self) -> FavoritesCollection:
        """Read favorites from durable storage. Absent, corrupt or unreadable data means no favorites."""
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.warning(f"Favorites read failed, treating as empty: {e}")
            return FavoritesCollection()
        if raw is None:
            return FavoritesCollection()
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            logger.warning(f"Stored favorites are not valid JSON, treating as empty: {e}")
            return FavoritesCollection()
        if not isinstance(data, list):
            logger.warning("Stored favorites are not a list, treating as empty")
            return FavoritesCollection()
        return FavoritesCollection.from_list(data)

    def persist(self, collection: FavoritesCollection) -> None:
        """Overwrite the stored favorites with the full collection. Raises StorageWriteError."""
        payload = json.dumps(collection.to_list(), ensure_ascii=False)
        try:
            self.storage.set(self.key, payload)
        except StorageWriteError:
            logger.error(f"Failed to persist {len(collection)} favorites")
            raise
        except Exception as e:
            logger.error(f"Failed to persist {len(collection)} favorites: {e}")
            raise StorageWriteError("Failed to update favorite plants") from e

    # --- Commands: load, compute, persist ------------------------------------
    def _commit(self, change):
        """Apply `change` to the stored favorites. Returns (collection, changed)."""
        with self._lock:
            current = self.load()
            updated = change(current)
            if updated is current:
                return current, False
            # On failure the caller keeps `current`; `updated` is discarded
            self.persist(updated)
            return updated, True

    def add_favorite(self, plant: PlantRecord) -> FavoritesCollection:
        result, changed = self._commit(lambda c: c.add(plant))
        if changed:
            logger.info(f"Favorite added: {plant.id}")
        return result

    def remove_favorite(self, plant_id: PlantId) -> FavoritesCollection:
        result, changed = self._commit(lambda c: c.remove(plant_id) if c.is_favorite(plant_id) else c)
        if changed:
            logger.info(f"Favorite removed: {plant_id}")
        return result

    def toggle_favorite(self, plant: PlantRecord) -> FavoritesCollection:
        result, _ = self._commit(lambda c: c.toggle(plant))
        state = "on" if result.is_favorite(plant.id) else "off"
        logger.info(f"Favorite toggled {state}: {plant.id}")
        return result
