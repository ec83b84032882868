"""In-memory user directory used for authentication, optionally seeded from a JSON file."""
import json
import logging
from pathlib import Path
from threading import Lock
from typing import Dict, List, Optional

import bcrypt

from flora.domain.User import User
from flora.domain.errors import DuplicateUserError
from flora.utilities.config import BCRYPT_ROUNDS
from flora.utilities.constants import AVATAR_URL_TEMPLATE

logger = logging.getLogger(__name__)


class UserDirectory:
    def __init__(self, users: Optional[List[User]] = None, rounds: int = BCRYPT_ROUNDS):
        self._users: List[User] = list(users or [])
        self._rounds = rounds
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._users)

    def hash_password(self, password: str) -> str:
        """Hash the provided password using bcrypt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def check_password(stored_hash: str, provided_password: str) -> bool:
        """Validate a plaintext password against the stored hash."""
        if not stored_hash:
            return False
        try:
            return bcrypt.checkpw(provided_password.encode("utf-8"), stored_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Malformed password hash in directory")
            return False

    def find_user(self, email: str, password: str) -> Optional[User]:
        for user in self._users:
            if user.email == email and self.check_password(user.password_hash, password):
                return user
        return None

    def register_user(self, fields: Dict[str, str]) -> User:
        '''
        Adds a new account. ``fields`` holds name, email, username and password.
        Raises DuplicateUserError when the email or username is taken.
        '''
        email = fields["email"]
        username = fields["username"]
        with self._lock:
            if any(u.email == email or u.username == username for u in self._users):
                raise DuplicateUserError("Email or username already exists")
            new_id = len(self._users) + 1
            user = User(
                id=new_id,
                name=fields["name"],
                email=email,
                username=username,
                password_hash=self.hash_password(fields["password"]),
                image=AVATAR_URL_TEMPLATE.format(id=new_id),
            )
            self._users.append(user)
        logger.info(f"User registered: {username}")
        return user

    @classmethod
    def from_file(cls, path: Path, rounds: int = BCRYPT_ROUNDS) -> "UserDirectory":
        """Load seed users (with ``password_hash``) from a JSON list. Missing or bad file -> empty directory."""
        path = Path(path)
        if not path.exists():
            return cls(rounds=rounds)
        try:
            with open(path, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Invalid users seed file {path}: {e}")
            return cls(rounds=rounds)
        users = []
        for entry in entries if isinstance(entries, list) else []:
            try:
                users.append(User.from_dict(entry))
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping seed user entry: {e}")
        logger.info(f"Loaded {len(users)} users from {path.name}")
        return cls(users, rounds=rounds)
