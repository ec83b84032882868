import unittest
from flora.domain.Plant import PlantRecord
from flora.domain.errors import PendingNotFound
from flora.infra.Favorites_Repository import FavoritesStore
from flora.infra.Key_Value_Store import MemoryKeyValueStore
from flora.logic.favorites.confirmation import ConfirmationGate
from flora.utilities.constants import MAX_PENDING


class TestConfirmationGate(unittest.TestCase):

    def setUp(self):
        self.store = FavoritesStore(MemoryKeyValueStore())
        self.gate = ConfirmationGate(self.store)
        self.rose = PlantRecord(1, "Rose")

    def test_nothing_changes_until_confirmed(self):
        pending = self.gate.request_toggle(self.rose)
        self.assertEqual(pending.action, "add")
        self.assertEqual(pending.prompt, "Add this plant to favorites?")
        self.assertFalse(self.store.load().is_favorite(1))
        self.gate.confirm(pending.token)
        self.assertTrue(self.store.load().is_favorite(1))

    def test_cancel_discards(self):
        pending = self.gate.request_toggle(self.rose)
        self.gate.cancel(pending.token)
        self.assertFalse(self.store.load().is_favorite(1))
        self.assertEqual(len(self.gate), 0)
        with self.assertRaises(PendingNotFound):
            self.gate.confirm(pending.token)

    def test_retoggle_existing_favorite_is_gated_too(self):
        self.store.add_favorite(self.rose)
        pending = self.gate.request_toggle(self.rose)
        self.assertEqual(pending.action, "remove")
        self.assertEqual(pending.prompt, "Remove this plant from favorites?")
        self.assertTrue(self.store.load().is_favorite(1))
        self.gate.confirm(pending.token)
        self.assertFalse(self.store.load().is_favorite(1))

    def test_unanswered_confirmations_are_capped(self):
        gate = ConfirmationGate(self.store, max_pending=10)
        tokens = [gate.request_toggle(self.rose).token for _ in range(500)]
        self.assertEqual(len(gate), 10)
        # oldest dropped, newest still answerable
        with self.assertRaises(PendingNotFound):
            gate.confirm(tokens[0])
        gate.confirm(tokens[-1])
        self.assertTrue(self.store.load().is_favorite(1))

    def test_default_cap(self):
        for _ in range(MAX_PENDING + 50):
            self.gate.request_toggle(self.rose)
        self.assertEqual(len(self.gate), MAX_PENDING)

    def test_unknown_token(self):
        with self.assertRaises(PendingNotFound):
            self.gate.cancel("nope")


if __name__ == '__main__':
    unittest.main()
