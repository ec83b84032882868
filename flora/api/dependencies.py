"""FastAPI dependency wiring.

Routes never reach for module globals: they receive one ``Services`` bundle
per request. Tests swap it through ``app.dependency_overrides[get_services]``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from flora.infra.Catalog_Client import CatalogClient
from flora.infra.Favorites_Repository import FavoritesStore
from flora.infra.Key_Value_Store import JsonFileKeyValueStore, KeyValueStore
from flora.infra.Session_Repository import SessionStore
from flora.infra.User_Directory import UserDirectory
from flora.infra.paths import DEVICE_STORE_FILE, USERS_FILE
from flora.logic.account.auth import AccountService
from flora.logic.favorites.confirmation import ConfirmationGate


class Services:
    def __init__(self, storage: KeyValueStore, directory: UserDirectory,
                 catalog: Optional[CatalogClient] = None):
        self.storage = storage
        self.favorites = FavoritesStore(storage)
        self.sessions = SessionStore(storage)
        self.directory = directory
        self.accounts = AccountService(directory, self.sessions)
        self.gate = ConfirmationGate(self.favorites)
        self.catalog = catalog or CatalogClient()


@lru_cache(maxsize=1)
def get_services() -> Services:
    """Process-wide services backed by the JSON device store."""
    return Services(JsonFileKeyValueStore(DEVICE_STORE_FILE), UserDirectory.from_file(USERS_FILE))


__all__ = ["Services", "get_services"]
