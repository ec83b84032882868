"""Account flows: login, registration, sign-out.

Validation failures abort before any state is touched. A successful login or
registration replaces the stored session.
"""
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from flora.domain.User import UserSession
from flora.domain.errors import AuthenticationFailed, NotLoggedIn, ValidationFailed
from flora.infra.Session_Repository import SessionStore
from flora.infra.User_Directory import UserDirectory
from flora.utilities.validators import LoginInput, RegisterInput

logger = logging.getLogger(__name__)


def _first_error(e: ValidationError) -> str:
    errors = e.errors()
    return errors[0]["msg"] if errors else "Invalid input"


class AccountService:
    def __init__(self, directory: UserDirectory, sessions: SessionStore):
        self.directory = directory
        self.sessions = sessions

    def login(self, data: Dict[str, Any]) -> UserSession:
        try:
            form = LoginInput.model_validate(data or {})
        except ValidationError as e:
            raise ValidationFailed(_first_error(e)) from e
        user = self.directory.find_user(form.email, form.password)
        if user is None:
            logger.info(f"Failed login for {form.email}")
            raise AuthenticationFailed("Invalid email or password")
        session = user.to_session()
        self.sessions.save_user(session)
        return session

    def register(self, data: Dict[str, Any]) -> UserSession:
        try:
            form = RegisterInput.model_validate(data or {})
        except ValidationError as e:
            raise ValidationFailed(_first_error(e)) from e
        user = self.directory.register_user(form.directory_fields())
        session = user.to_session()
        self.sessions.save_user(session)
        return session

    def logout(self) -> None:
        self.sessions.sign_out()

    def current_user(self) -> Optional[UserSession]:
        return self.sessions.load_user()

    def require_user(self) -> UserSession:
        session = self.sessions.load_user()
        if session is None:
            raise NotLoggedIn("Not logged in")
        return session
