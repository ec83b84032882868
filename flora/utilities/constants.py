from typing import Final

# Durable key-value entries
USER_KEY: Final[str] = "user"
FAVORITES_KEY: Final[str] = "favorites"

PLACEHOLDER_IMAGE_URL: Final[str] = "https://via.placeholder.com/150"
AVATAR_URL_TEMPLATE: Final[str] = "https://randomuser.me/api/portraits/men/{id}.jpg"

# Account validation rules
EMAIL_PATTERN: Final[str] = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
USERNAME_PATTERN: Final[str] = r"^[a-zA-Z0-9_]{3,20}$"
MIN_PASSWORD_LENGTH: Final[int] = 6

# Confirmation prompts
CONFIRM_ADD_PROMPT: Final[str] = "Add this plant to favorites?"
CONFIRM_REMOVE_PROMPT: Final[str] = "Remove this plant from favorites?"

MAX_NOTICES: Final[int] = 300
# Unanswered confirmations kept; the oldest is dropped beyond this
MAX_PENDING: Final[int] = 100
