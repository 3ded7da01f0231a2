from typing import Optional

from rentease.models.base import CamelModel


class MessageCreate(CamelModel):
    sender_id: str
    receiver_id: str
    subject: str = ""
    content: str


class MessageUpdate(CamelModel):
    subject: Optional[str] = None
    content: Optional[str] = None
    read: Optional[bool] = None
