import json
import logging
from typing import Optional

from flora.domain.User import UserSession
from flora.domain.errors import StorageWriteError
from flora.infra.Key_Value_Store import KeyValueStore
from flora.utilities.constants import USER_KEY

logger = logging.getLogger(__name__)


class SessionStore:
    """Zero-or-one active session stored under the ``user`` key."""

    def __init__(self, storage: KeyValueStore, key: str = USER_KEY):
        self.storage = storage
        self.key = key

    def load_user(self) -> Optional[UserSession]:
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.warning(f"Session read failed, treating as logged out: {e}")
            return None
        if raw is None:
            return None
        try:
            return UserSession.from_dict(json.loads(raw))
        except (TypeError, json.JSONDecodeError) as e:
            logger.warning(f"Stored session is not valid JSON: {e}")
            return None

    def is_logged_in(self) -> bool:
        return self.load_user() is not None

    def save_user(self, session: UserSession) -> None:
        try:
            self.storage.set(self.key, json.dumps(session.to_dict(), ensure_ascii=False))
        except StorageWriteError:
            raise
        except Exception as e:
            raise StorageWriteError("Failed to save session") from e
        logger.info(f"Session started for {session.username}")

    def sign_out(self) -> None:
        try:
            self.storage.remove(self.key)
        except StorageWriteError:
            raise
        except Exception as e:
            raise StorageWriteError("Failed to log out") from e
        logger.info("Session cleared")
