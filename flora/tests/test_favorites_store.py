import json
import unittest
from flora.domain.Favorites import FavoritesCollection
from flora.domain.Plant import PlantRecord
from flora.domain.errors import StorageReadError, StorageWriteError
from flora.infra.Favorites_Repository import FavoritesStore
from flora.infra.Key_Value_Store import MemoryKeyValueStore


class FailingStorage(MemoryKeyValueStore):
    """Memory store whose reads and/or writes can be switched off."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key):
        if self.fail_reads:
            raise StorageReadError("disk unavailable")
        return super().get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise StorageWriteError("disk full")
        super().set(key, value)


class TestFavoritesStore(unittest.TestCase):

    def setUp(self):
        self.storage = FailingStorage()
        self.store = FavoritesStore(self.storage)
        self.rose = PlantRecord(1, "Rose", "Rosa", "https://img/rose.jpg")
        self.tulip = PlantRecord(2, "Tulip", "Tulipa")

    def test_load_absent_key_is_empty(self):
        self.assertEqual(len(self.store.load()), 0)

    def test_load_corrupt_text_is_empty(self):
        self.storage.set("favorites", "{not json")
        self.assertEqual(self.store.load().ids(), [])

    def test_load_wrong_shape_is_empty(self):
        self.storage.set("favorites", json.dumps({"id": 1}))
        self.assertEqual(self.store.load().ids(), [])

    def test_load_read_failure_is_empty(self):
        self.storage.set("favorites", json.dumps([{"id": 1}]))
        self.storage.fail_reads = True
        self.assertEqual(self.store.load().ids(), [])

    def test_round_trip_keeps_ids(self):
        self.store.persist(FavoritesCollection([self.rose, self.tulip]))
        before = self.store.load()
        self.store.persist(before)
        after = self.store.load()
        self.assertEqual(set(after.ids()), set(before.ids()))
        self.assertEqual(after, before)

    def test_persist_is_full_overwrite(self):
        self.store.persist(FavoritesCollection([self.rose, self.tulip]))
        self.store.persist(FavoritesCollection([self.tulip]))
        stored = json.loads(self.storage.get("favorites"))
        self.assertEqual([e["id"] for e in stored], [2])

    def test_persist_failure_is_raised(self):
        self.storage.fail_writes = True
        with self.assertRaises(StorageWriteError):
            self.store.persist(FavoritesCollection([self.rose]))

    def test_add_favorite_persists(self):
        result = self.store.add_favorite(self.rose)
        self.assertEqual(result.ids(), [1])
        self.assertEqual(self.store.load().ids(), [1])

    def test_failed_add_leaves_storage_unchanged(self):
        self.store.add_favorite(self.rose)
        self.storage.fail_writes = True
        with self.assertRaises(StorageWriteError):
            self.store.add_favorite(self.tulip)
        self.storage.fail_writes = False
        self.assertEqual(self.store.load().ids(), [1])

    def test_remove_favorite_absent_is_noop(self):
        self.store.add_favorite(self.rose)
        self.assertEqual(self.store.remove_favorite(42).ids(), [1])

    def test_remove_logs_only_real_removals(self):
        self.store.add_favorite(self.rose)
        with self.assertNoLogs('flora.infra.Favorites_Repository', level='INFO'):
            self.store.remove_favorite(42)
        with self.assertLogs('flora.infra.Favorites_Repository', level='INFO') as logs:
            self.store.remove_favorite(1)
        self.assertEqual(logs.output, ['INFO:flora.infra.Favorites_Repository:Favorite removed: 1'])

    def test_re_adding_existing_favorite_is_silent(self):
        self.store.add_favorite(self.rose)
        with self.assertNoLogs('flora.infra.Favorites_Repository', level='INFO'):
            self.assertEqual(self.store.add_favorite(self.rose).ids(), [1])

    def test_toggle_favorite(self):
        self.assertTrue(self.store.toggle_favorite(self.rose).is_favorite(1))
        self.assertFalse(self.store.toggle_favorite(self.rose).is_favorite(1))
        self.assertEqual(self.store.load().ids(), [])


if __name__ == '__main__':
    unittest.main()
