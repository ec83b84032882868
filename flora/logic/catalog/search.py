from typing import Any, Dict, Iterable, List, Optional

from flora.domain.Favorites import FavoritesCollection
from flora.domain.Plant import PlantRecord


def filter_catalog(plants: Iterable[PlantRecord], query: Optional[str]) -> List[PlantRecord]:
    """Case-insensitive substring match on common or scientific name; blank query keeps everything."""
    plants = list(plants)
    q = (query or "").strip().lower()
    if not q:
        return plants
    return [p for p in plants
            if q in (p.common_name or "").lower() or q in (p.scientific_name or "").lower()]


def annotate_favorites(plants: Iterable[PlantRecord], favorites: FavoritesCollection) -> List[Dict[str, Any]]:
    """Catalog rows with an ``is_favorite`` flag, as the list screen renders them."""
    rows = []
    for plant in plants:
        row = plant.to_dict()
        row["is_favorite"] = favorites.is_favorite(plant.id)
        rows.append(row)
    return rows
