"""Plant domain entities: catalog record and detail record."""
from typing import Any, Dict, Optional, Union

from flora.utilities.constants import PLACEHOLDER_IMAGE_URL

PlantId = Union[int, str]


class PlantRecord:
    """A catalog entry. Only ``id`` carries meaning for favorites; the rest is display data."""

    _known = ("id", "common_name", "scientific_name", "image_url")

    def __init__(self, id: PlantId, common_name: Optional[str] = None,
                 scientific_name: Optional[str] = None, image_url: Optional[str] = None,
                 extra: Optional[Dict[str, Any]] = None):
        self.id = id
        self.common_name = common_name
        self.scientific_name = scientific_name
        self.image_url = image_url
        # Catalog fields we don't model (slug, family, genus...) survive round trips
        self.extra = dict(extra) if extra else {}

    @property
    def display_name(self) -> str:
        return self.common_name or "Unknown Plant"

    @property
    def display_scientific_name(self) -> str:
        return self.scientific_name or "Unknown Scientific Name"

    @property
    def display_image(self) -> str:
        return self.image_url or PLACEHOLDER_IMAGE_URL

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlantRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((type(self.id).__name__, self.id))

    def __str__(self) -> str:
        return f"{self.id} - {self.display_name} ({self.display_scientific_name})"

    __repr__ = __str__

    @classmethod
    def from_dict(cls, data):
        '''Creates a record from a catalog/storage dict. Raises ValueError when ``id`` is missing.'''
        d = dict(data) if isinstance(data, dict) else {}
        if d.get("id") is None:
            raise ValueError("Plant record has no id")
        extra = {k: v for k, v in d.items() if k not in cls._known}
        return cls(d["id"], d.get("common_name"), d.get("scientific_name"), d.get("image_url"), extra=extra)

    def to_dict(self):
        '''Converts the record to a dict for JSON persistence (unknown catalog keys included).'''
        d = dict(self.extra)
        d.update({
            "id": self.id,
            "common_name": self.common_name,
            "scientific_name": self.scientific_name,
            "image_url": self.image_url,
        })
        return d


class PlantDetailRecord(PlantRecord):
    """Detail view of a plant, as returned by ``GET <catalog>/{id}``."""

    _known = PlantRecord._known + ("year", "bibliography", "author", "status", "rank")

    def __init__(self, id: PlantId, common_name: Optional[str] = None,
                 scientific_name: Optional[str] = None, image_url: Optional[str] = None,
                 year: Optional[int] = None, bibliography: Optional[str] = None,
                 author: Optional[str] = None, status: Optional[str] = None,
                 rank: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        super().__init__(id, common_name, scientific_name, image_url, extra=extra)
        self.year = year
        self.bibliography = bibliography
        self.author = author
        self.status = status
        self.rank = rank

    @classmethod
    def from_dict(cls, data):
        d = dict(data) if isinstance(data, dict) else {}
        if d.get("id") is None:
            raise ValueError("Plant record has no id")
        extra = {k: v for k, v in d.items() if k not in cls._known}
        return cls(d["id"], d.get("common_name"), d.get("scientific_name"), d.get("image_url"),
                   year=d.get("year"), bibliography=d.get("bibliography"), author=d.get("author"),
                   status=d.get("status"), rank=d.get("rank"), extra=extra)

    def to_dict(self):
        d = super().to_dict()
        d.update({
            "year": self.year,
            "bibliography": self.bibliography,
            "author": self.author,
            "status": self.status,
            "rank": self.rank,
        })
        return d

    def to_display(self) -> Dict[str, Any]:
        """Detail screen rows with the fallbacks shown for missing values."""
        return {
            "id": self.id,
            "common_name": self.display_name,
            "scientific_name": self.display_scientific_name,
            "image_url": self.display_image,
            "year": self.year or "N/A",
            "bibliography": self.bibliography or "No bibliography available",
            "author": self.author or "Unknown",
            "status": self.status or "N/A",
            "rank": self.rank or "N/A",
        }
