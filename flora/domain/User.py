"""User entities: directory account (with password hash) and the logged-in session."""
from typing import Optional, Union

UserId = Union[int, str]


class User:
    """Directory entry. Stores a bcrypt hash, never the plaintext password."""

    def __init__(self, id: UserId, name: str = "", email: str = "", username: str = "",
                 password_hash: str = "", image: str = ""):
        self.id = id
        self.name = name
        self.email = email
        self.username = username
        self.password_hash = password_hash
        self.image = image

    def __str__(self) -> str:
        return f"{self.id} - {self.username} <{self.email}>"

    __repr__ = __str__

    def to_session(self) -> "UserSession":
        return UserSession(self.id, self.name, self.email, self.username, self.image)

    @staticmethod
    def from_dict(data):
        '''Creates a User from a seed-file dict. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "email", "username", "password_hash", "image"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        if filtered.get("id") is None:
            raise ValueError("User entry has no id")
        return User(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "password_hash": self.password_hash,
            "image": self.image,
        }


class UserSession:
    """The active session persisted under the ``user`` key."""

    def __init__(self, id: UserId, name: str = "", email: str = "", username: str = "",
                 image: str = ""):
        self.id = id
        self.name = name
        self.email = email
        self.username = username
        self.image = image

    def __eq__(self, other) -> bool:
        if not isinstance(other, UserSession):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"Session({self.username} <{self.email}>)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> Optional["UserSession"]:
        '''
        Rebuilds a session from storage. Returns None for anything that isn't
        a dict with an id. A legacy ``password`` key is dropped.
        '''
        if not isinstance(data, dict) or data.get("id") is None:
            return None
        return UserSession(
            data["id"],
            name=data.get("name") or "",
            email=data.get("email") or "",
            username=data.get("username") or "",
            image=data.get("image") or "",
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "image": self.image,
        }
