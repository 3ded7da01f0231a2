from datetime import datetime

from pydantic import Field

from rentease.models.base import CamelModel, utcnow


class Message(CamelModel):
    """A standalone message between two users; there is no threading"""
    id: str
    sender_id: str
    receiver_id: str
    subject: str = ""
    content: str = ""
    read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
