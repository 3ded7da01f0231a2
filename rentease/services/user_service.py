"""
User Service
CRUD over portal accounts. Email uniqueness is checked only at registration
(see AuthService.register), not here.
"""
from typing import List, Optional

from rentease.models.user import User, UserRole
from rentease.services.base import EntityService
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey


class UserService(EntityService[User]):
    model = User
    collection = CollectionKey.USERS
    id_prefix = "user"
    entity_name = "User"

    def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive email lookup"""
        needle = (email or "").strip().lower()
        if not needle:
            return None
        for user in self._load():
            if user.email.strip().lower() == needle:
                return user
        return None

    def get_by_role(self, role: UserRole) -> ServiceResult[List[User]]:
        return self.list_by("role", role)
