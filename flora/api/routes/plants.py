"""Catalog routes: plant list (with favorite flags) and plant detail."""
from fastapi import APIRouter, Depends, Query

from flora.api.dependencies import Services, get_services
from flora.logic.catalog.search import annotate_favorites, filter_catalog

router = APIRouter(prefix="/api/plants")


def parse_plant_id(raw: str):
    """Catalog ids are integers; anything else (superscripts like "²" included) stays a string id."""
    # isdigit() accepts "²", which int() rejects
    return int(raw) if raw.isdecimal() else raw


@router.get("")
async def list_plants(q: str = Query(""), page: int = Query(1, ge=1),
                      services: Services = Depends(get_services)):
    plants = await services.catalog.list_plants(page)
    # Re-read favorites on every visit; no cached copy between screens
    favorites = services.favorites.load()
    rows = annotate_favorites(filter_catalog(plants, q), favorites)
    return {"page": page, "count": len(rows), "total": len(plants), "plants": rows}


@router.get("/{plant_id}")
async def plant_detail(plant_id: str, services: Services = Depends(get_services)):
    pid = parse_plant_id(plant_id)
    detail = await services.catalog.get_plant(pid)
    data = detail.to_display()
    data["is_favorite"] = services.favorites.load().is_favorite(detail.id)
    return data
