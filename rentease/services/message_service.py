"""
Message Service
Standalone messages between two users
"""
from typing import Any, Dict, List

from rentease.models.message import Message
from rentease.services.base import EntityService
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey


class MessageService(EntityService[Message]):
    model = Message
    collection = CollectionKey.MESSAGES
    id_prefix = "msg"
    entity_name = "Message"

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["read"] = False
        return data

    def send(self, payload) -> ServiceResult[Message]:
        return self.create(payload)

    def mark_as_read(self, message_id: str) -> ServiceResult[Message]:
        return self.update(message_id, {"read": True})

    def get_by_user(self, user_id: str) -> ServiceResult[List[Message]]:
        """Messages the user sent or received"""
        return ServiceResult.ok(
            [m for m in self._load() if m.sender_id == user_id or m.receiver_id == user_id]
        )

    def get_inbox(self, user_id: str) -> ServiceResult[List[Message]]:
        return self.list_by("receiver_id", user_id)

    def unread_count(self, user_id: str) -> int:
        return sum(1 for m in self._load() if m.receiver_id == user_id and not m.read)
