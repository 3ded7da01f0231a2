from typing import Optional

from rentease.models.base import CamelModel
from rentease.models.user import UserRole, UserStatus


class UserCreate(CamelModel):
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    role: UserRole = UserRole.TENANT
    status: UserStatus = UserStatus.ACTIVE
    avatar_url: Optional[str] = None


class UserUpdate(CamelModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    avatar_url: Optional[str] = None
