from pathlib import Path

from flora.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR, USERS_SEED_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
DEVICE_STORE_FILE = DATA_DIR / 'device_storage.json'
USERS_FILE = Path(USERS_SEED_FILE).resolve() if USERS_SEED_FILE else DATA_DIR / 'users.json'

__all__ = ['DATA_DIR', 'DEVICE_STORE_FILE', 'USERS_FILE']
