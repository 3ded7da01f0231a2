from fastapi import APIRouter, Depends, Query
from typing import Optional

from rentease.api.responses import created, envelope
from rentease.core.deps import get_services
from rentease.models.user import UserRole
from rentease.schemas.user import UserCreate, UserUpdate
from rentease.services import Services

router = APIRouter()


@router.get("/")
def list_users(role: Optional[UserRole] = Query(None), services: Services = Depends(get_services)):
    """All users, optionally narrowed to one role"""
    if role:
        return envelope(services.users.get_by_role(role))
    return envelope(services.users.list_all())


@router.get("/{user_id}")
def get_user(user_id: str, services: Services = Depends(get_services)):
    return envelope(services.users.get_by_id(user_id))


@router.post("/", status_code=201)
def create_user(user_in: UserCreate, services: Services = Depends(get_services)):
    return created(services.users.create(user_in))


@router.patch("/{user_id}")
def update_user(user_id: str, user_update: UserUpdate, services: Services = Depends(get_services)):
    return envelope(services.users.update(user_id, user_update))


@router.delete("/{user_id}")
def delete_user(user_id: str, services: Services = Depends(get_services)):
    return envelope(services.users.delete(user_id))
