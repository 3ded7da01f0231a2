from typing import Optional

from pydantic import EmailStr

from rentease.models.base import CamelModel
from rentease.models.user import User


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    role: Optional[str] = None


class ResetPasswordRequest(CamelModel):
    email: EmailStr


class AuthUser(User):
    """Persisted session: the signed-in user plus their bearer token"""
    token: str
    token_type: str = "bearer"
