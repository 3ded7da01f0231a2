from enum import Enum
from typing import Optional

from rentease.models.base import EntityModel


class UserRole(str, Enum):
    ADMIN = "admin"
    LANDLORD = "landlord"
    TENANT = "tenant"


class UserStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    SUSPENDED = "suspended"


class User(EntityModel):
    """Portal account for an admin, landlord or tenant"""
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    role: UserRole = UserRole.TENANT
    status: UserStatus = UserStatus.ACTIVE
    avatar_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
