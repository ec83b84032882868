import unittest
from flora.domain.Favorites import FavoritesCollection
from flora.domain.Plant import PlantRecord


def plant(pid, name=None, scientific=None):
    return PlantRecord(pid, common_name=name, scientific_name=scientific)


class TestFavoritesCollection(unittest.TestCase):

    def setUp(self):
        self.rose = plant(1, "Rose", "Rosa")
        self.tulip = plant(2, "Tulip", "Tulipa")
        self.fern = plant(3, "Boston fern", "Nephrolepis exaltata")

    def test_add_new_plant(self):
        favorites = FavoritesCollection([self.rose])
        updated = favorites.add(self.tulip)
        self.assertTrue(updated.is_favorite(2))
        self.assertEqual(len(updated), len(favorites) + 1)
        self.assertEqual(updated.ids(), [1, 2])

    def test_add_is_idempotent(self):
        favorites = FavoritesCollection().add(self.rose).add(plant(1, "Rose again"))
        self.assertEqual(favorites.ids(), [1])
        self.assertEqual(list(favorites)[0].common_name, "Rose")

    def test_add_does_not_mutate_receiver(self):
        favorites = FavoritesCollection([self.rose])
        favorites.add(self.tulip)
        favorites.remove(1)
        self.assertEqual(favorites.ids(), [1])

    def test_remove_present_and_absent(self):
        favorites = FavoritesCollection([self.rose, self.tulip])
        self.assertFalse(favorites.remove(1).is_favorite(1))
        untouched = favorites.remove(99)
        self.assertFalse(untouched.is_favorite(99))
        self.assertEqual(untouched.ids(), [1, 2])

    def test_toggle_is_its_own_inverse(self):
        for start in (FavoritesCollection(), FavoritesCollection([self.rose, self.tulip])):
            for p in (self.rose, self.fern):
                twice = start.toggle(p).toggle(p)
                self.assertEqual(set(twice.ids()), set(start.ids()))

    def test_ids_of_different_types_are_distinct(self):
        favorites = FavoritesCollection([plant(1, "Rose")])
        self.assertFalse(favorites.is_favorite("1"))
        self.assertEqual(len(favorites.add(plant("1", "Rose text id"))), 2)

    def test_constructor_drops_duplicate_ids(self):
        favorites = FavoritesCollection([self.rose, plant(1, "Duplicate"), self.tulip])
        self.assertEqual(favorites.ids(), [1, 2])

    def test_search_blank_returns_everything_in_order(self):
        favorites = FavoritesCollection([self.tulip, self.rose, self.fern])
        self.assertEqual(favorites.search("").to_list(), [self.tulip, self.rose, self.fern])
        self.assertEqual(favorites.search("   ").to_list(), [self.tulip, self.rose, self.fern])
        self.assertEqual(favorites.search(None).to_list(), [self.tulip, self.rose, self.fern])

    def test_search_is_case_insensitive_on_common_name_only(self):
        favorites = FavoritesCollection([self.rose, self.tulip, self.fern])
        self.assertEqual(favorites.search("FERN").to_list(), [self.fern])
        # scientific names don't count here
        self.assertEqual(favorites.search("rosa").to_list(), [])

    def test_search_skips_plants_without_common_name(self):
        favorites = FavoritesCollection([plant(7), self.rose])
        self.assertEqual(favorites.search("ro").to_list(), [self.rose])

    def test_search_is_restartable(self):
        results = FavoritesCollection([self.rose, self.tulip]).search("t")
        self.assertEqual(list(results), [self.tulip])
        self.assertEqual(list(results), [self.tulip])
        self.assertEqual(len(results), 1)

    def test_scenario_add_remove_search(self):
        favorites = FavoritesCollection([plant(1, "Rose")])
        favorites = favorites.add(plant(2, "Tulip"))
        self.assertEqual(favorites.ids(), [1, 2])
        favorites = favorites.remove(1)
        self.assertEqual(favorites.ids(), [2])
        self.assertEqual([p.id for p in favorites.search("tu")], [2])
        self.assertEqual(favorites.search("zz").to_list(), [])

    def test_from_list_skips_entries_without_id(self):
        favorites = FavoritesCollection.from_list([
            {"id": 1, "common_name": "Rose"},
            {"common_name": "No id"},
            "not a dict",
            {"id": 2, "common_name": "Tulip", "slug": "tulipa"},
        ])
        self.assertEqual(favorites.ids(), [1, 2])
        self.assertEqual(favorites.to_list()[1]["slug"], "tulipa")


if __name__ == '__main__':
    unittest.main()
