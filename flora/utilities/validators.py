"""
Input validation schemas using Pydantic.

Account rules run in a fixed order and stop at the first failure, so the user
always sees the single most relevant message.
"""
import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic_core import PydanticCustomError

from flora.utilities.constants import EMAIL_PATTERN, MIN_PASSWORD_LENGTH, USERNAME_PATTERN


def _fail(message: str):
    raise PydanticCustomError("account", message)


class _AccountInput(BaseModel):
    @field_validator('*', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        """Missing values behave like empty fields."""
        return "" if v is None else v


class LoginInput(_AccountInput):
    """Schema for login form validation."""
    email: str = ""
    password: str = ""

    @model_validator(mode='after')
    def check_rules(self):
        if not self.email or not self.password:
            _fail('Please fill in all fields')
        if '@' not in self.email or '.' not in self.email:
            _fail('Please enter a valid email')
        return self


class RegisterInput(_AccountInput):
    """Schema for registration form validation."""
    name: str = ""
    email: str = ""
    username: str = ""
    password: str = ""
    confirm_password: str = ""

    @field_validator('name', 'email', 'username')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()

    @model_validator(mode='after')
    def check_rules(self):
        if not all((self.name, self.email, self.username, self.password, self.confirm_password)):
            _fail('Please fill in all fields')
        if not re.match(EMAIL_PATTERN, self.email):
            _fail('Please enter a valid email')
        if not re.match(USERNAME_PATTERN, self.username):
            _fail('Username must be 3-20 characters long and can only contain letters, numbers, and underscores')
        if self.password != self.confirm_password:
            _fail('Passwords do not match')
        if len(self.password) < MIN_PASSWORD_LENGTH:
            _fail(f'Password must be at least {MIN_PASSWORD_LENGTH} characters long')
        return self

    def directory_fields(self):
        return {
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "password": self.password,
        }


class PlantInput(BaseModel):
    """Schema for a plant record sent by the catalog screen. Extra catalog fields are kept."""
    model_config = ConfigDict(extra='allow')

    id: Union[int, str]
    common_name: Optional[str] = None
    scientific_name: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError('Plant id cannot be empty')
        return v
