"""Favorites aggregate: ordered, id-unique, immutable collection of PlantRecord.

Every mutation returns a new collection and leaves the receiver untouched, so
a screen holding an older snapshot never sees it change underneath it.
"""
from typing import Iterable, Iterator, List, Optional, Tuple

from flora.domain.Plant import PlantId, PlantRecord


class FavoritesCollection:
    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[PlantRecord]] = None):
        unique: List[PlantRecord] = []
        seen = set()
        for plant in items or ():
            key = _id_key(plant.id)
            if key in seen:
                continue
            seen.add(key)
            unique.append(plant)
        self._items: Tuple[PlantRecord, ...] = tuple(unique)

    # --- Queries -----------------------------------------------------------
    def is_favorite(self, plant_id: PlantId) -> bool:
        key = _id_key(plant_id)
        return any(_id_key(p.id) == key for p in self._items)

    def ids(self) -> List[PlantId]:
        return [p.id for p in self._items]

    def search(self, query: Optional[str] = "") -> "FavoritesSearch":
        '''
        Case-insensitive substring match on common_name. Blank query returns everything, in order.
        '''
        return FavoritesSearch(self, query)

    # --- Functional updates -------------------------------------------------
    def add(self, plant: PlantRecord) -> "FavoritesCollection":
        if self.is_favorite(plant.id):
            return self
        return FavoritesCollection(self._items + (plant,))

    def remove(self, plant_id: PlantId) -> "FavoritesCollection":
        key = _id_key(plant_id)
        return FavoritesCollection(p for p in self._items if _id_key(p.id) != key)

    def toggle(self, plant: PlantRecord) -> "FavoritesCollection":
        if self.is_favorite(plant.id):
            return self.remove(plant.id)
        return self.add(plant)

    # --- Container protocol --------------------------------------------------
    def __iter__(self) -> Iterator[PlantRecord]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, plant_id) -> bool:
        return self.is_favorite(plant_id)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FavoritesCollection):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(p) for p in self._items)
        return f"Favorites:\n\t{items_str}"

    __repr__ = __str__

    @classmethod
    def from_list(cls, data):
        '''
        Builds a collection from a decoded JSON array. Entries that aren't
        plant dicts with an id are skipped; duplicate ids keep the first.
        '''
        plants = []
        for entry in data or []:
            try:
                plants.append(PlantRecord.from_dict(entry))
            except ValueError:
                continue
        return cls(plants)

    def to_list(self):
        return [p.to_dict() for p in self._items]


class FavoritesSearch:
    """Restartable view over a collection filtered by a query; recomputed on every iteration."""

    def __init__(self, collection: FavoritesCollection, query: Optional[str]):
        self._collection = collection
        self.query = (query or "").strip().lower()

    def __iter__(self) -> Iterator[PlantRecord]:
        if not self.query:
            return iter(self._collection)
        return (p for p in self._collection if self.query in (p.common_name or "").lower())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def to_list(self) -> List[PlantRecord]:
        return list(self)


def _id_key(plant_id: PlantId):
    # 1 and "1" are distinct ids
    return (type(plant_id).__name__, plant_id)
