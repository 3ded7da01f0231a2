from fastapi import APIRouter, Depends

from rentease.api.responses import created, envelope
from rentease.core.deps import get_services
from rentease.schemas.message import MessageCreate, MessageUpdate
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_messages(services: Services = Depends(get_services)):
    return envelope(services.messages.list_all())


@router.get("/user/{user_id}")
def get_user_messages(user_id: str, services: Services = Depends(get_services)):
    """Messages the user sent or received"""
    return envelope(services.messages.get_by_user(user_id))


@router.get("/inbox/{user_id}")
def get_inbox(user_id: str, services: Services = Depends(get_services)):
    return envelope(services.messages.get_inbox(user_id))


@router.get("/{message_id}")
def get_message(message_id: str, services: Services = Depends(get_services)):
    return envelope(services.messages.get_by_id(message_id))


@router.post("/", status_code=201)
def send_message(message_in: MessageCreate, services: Services = Depends(get_services)):
    return created(services.messages.send(message_in))


@router.patch("/{message_id}")
def update_message(message_id: str, message_update: MessageUpdate, services: Services = Depends(get_services)):
    return envelope(services.messages.update(message_id, message_update))


@router.post("/{message_id}/read")
def mark_message_read(message_id: str, services: Services = Depends(get_services)):
    return envelope(services.messages.mark_as_read(message_id))


@router.delete("/{message_id}")
def delete_message(message_id: str, services: Services = Depends(get_services)):
    return envelope(services.messages.delete(message_id))
