from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import ClassVar, Dict
import re

from matty.core.validation import InvalidField

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class UserRegister(BaseModel):
    """Схема для регистрации пользователя"""
    error_messages: ClassVar[Dict[str, str]] = {
        "username": "Username must be at least 3 characters",
        "email": "Invalid email",
        "password": "Password must be at least 8 characters",
    }

    username: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator('username', 'email', mode='before')
    @classmethod
    def strip_fields(cls, v):
        return _strip(v)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        if not PASSWORD_PATTERN.search(v):
            raise InvalidField('Password must contain uppercase, lowercase, and number')
        return v


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    error_messages: ClassVar[Dict[str, str]] = {
        "email": "Invalid email",
        "password": "Password is required",
    }

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator('email', mode='before')
    @classmethod
    def strip_email(cls, v):
        return _strip(v)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()
