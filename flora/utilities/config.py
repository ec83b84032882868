"""Configuration management for the Flora plant catalog."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Plant catalog (Trefle). No baked-in token: set TREFLE_API_KEY in the environment or .env
TREFLE_API_KEY: Final[str] = os.getenv('TREFLE_API_KEY', '')
TREFLE_API_URL: Final[str] = os.getenv('TREFLE_API_URL', 'https://trefle.io/api/v1/plants')
CATALOG_TIMEOUT: Final[float] = float(os.getenv('CATALOG_TIMEOUT', '10'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Accounts
BCRYPT_ROUNDS: Final[int] = int(os.getenv('BCRYPT_ROUNDS', '12'))
USERS_SEED_FILE: Final[str] = os.getenv('USERS_SEED_FILE', '')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('FLORA_DATA_DIR', str(BASE_DIR / 'data')))
