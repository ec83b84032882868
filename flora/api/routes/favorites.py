"""Favorites routes.

Toggling from the catalog is two-step (toggle -> confirm/cancel). Removing
from the favorites list is immediate.
"""
from fastapi import APIRouter, Depends, Query

from flora.api.dependencies import Services, get_services
from flora.api.routes.plants import parse_plant_id
from flora.domain.Plant import PlantRecord
from flora.events.event_helpers import notify_success
from flora.utilities.validators import PlantInput

router = APIRouter(prefix="/api/favorites")


def _summary(collection, query: str = ""):
    items = collection.search(query).to_list()
    return {"count": len(items), "total": len(collection), "items": [p.to_dict() for p in items]}


@router.get("")
def list_favorites(q: str = Query(""), services: Services = Depends(get_services)):
    return _summary(services.favorites.load(), q)


@router.post("/toggle")
def request_toggle(plant: PlantInput, services: Services = Depends(get_services)):
    record = PlantRecord.from_dict(plant.model_dump())
    pending = services.gate.request_toggle(record)
    return {"status": "pending", **pending.to_dict()}


@router.post("/confirm/{token}")
def confirm_toggle(token: str, services: Services = Depends(get_services)):
    collection = services.gate.confirm(token)
    notify_success("Favorite plants updated")
    return {"status": "success", **_summary(collection)}


@router.post("/cancel/{token}")
def cancel_toggle(token: str, services: Services = Depends(get_services)):
    services.gate.cancel(token)
    return {"status": "cancelled"}


@router.delete("/{plant_id}")
def remove_favorite(plant_id: str, services: Services = Depends(get_services)):
    collection = services.favorites.remove_favorite(parse_plant_id(plant_id))
    return {"status": "success", **_summary(collection)}
