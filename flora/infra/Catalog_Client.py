"""Async client for the remote plant catalog (Trefle REST API)."""
import logging
from typing import List, Optional, Union

import httpx

from flora.domain.Plant import PlantDetailRecord, PlantRecord
from flora.domain.errors import CatalogError
from flora.utilities.config import CATALOG_TIMEOUT, TREFLE_API_KEY, TREFLE_API_URL

logger = logging.getLogger(__name__)


class CatalogClient:
    def __init__(self, base_url: str = TREFLE_API_URL, token: str = TREFLE_API_KEY,
                 timeout: float = CATALOG_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        # Injected in tests (httpx.MockTransport)
        self._transport = transport

    async def _get_json(self, url: str, params: dict, failure_message: str) -> dict:
        if not self.token:
            raise CatalogError("Plant catalog token is not configured")
        params = dict(params, token=self.token)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"Catalog request timed out: {url}")
            raise CatalogError("Plant catalog did not respond in time") from e
        except httpx.HTTPError as e:
            logger.error(f"Catalog request failed: {url}: {e}")
            raise CatalogError(failure_message) from e
        if response.status_code != 200:
            logger.error(f"Catalog answered {response.status_code} for {url}")
            raise CatalogError(failure_message)
        try:
            body = response.json()
        except ValueError as e:
            raise CatalogError(failure_message) from e
        return body if isinstance(body, dict) else {}

    async def list_plants(self, page: int = 1) -> List[PlantRecord]:
        body = await self._get_json(self.base_url, {"page": page}, "Failed to fetch plants")
        plants = []
        for entry in body.get("data") or []:
            try:
                plants.append(PlantRecord.from_dict(entry))
            except ValueError:
                logger.warning("Skipping catalog entry without id")
        return plants

    async def get_plant(self, plant_id: Union[int, str]) -> PlantDetailRecord:
        body = await self._get_json(f"{self.base_url}/{plant_id}", {}, "Failed to fetch plant details")
        try:
            return PlantDetailRecord.from_dict(body.get("data"))
        except ValueError as e:
            raise CatalogError("Failed to fetch plant details") from e
