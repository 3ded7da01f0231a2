"""
Auth Routes
Session shim endpoints. Passwords are length-checked only; nothing is hashed or stored.
"""
from fastapi import APIRouter, Depends
import logging

from rentease.api.responses import created, envelope
from rentease.core.deps import get_current_user, get_services
from rentease.models.user import User
from rentease.schemas.auth import LoginRequest, RegisterRequest, ResetPasswordRequest
from rentease.services import Services, ServiceResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login")
def login(credentials: LoginRequest, services: Services = Depends(get_services)):
    """Open a session and return the user with a bearer token"""
    return envelope(services.auth.login(credentials.email, credentials.password))


@router.post("/register", status_code=201)
def register(user_in: RegisterRequest, services: Services = Depends(get_services)):
    """Register a new tenant or landlord"""
    logger.info(f"Registration attempt: {user_in.email}")
    return created(services.auth.register(user_in))


@router.post("/logout")
def logout(services: Services = Depends(get_services)):
    return envelope(services.auth.logout())


@router.post("/reset-password")
def reset_password(body: ResetPasswordRequest, services: Services = Depends(get_services)):
    return envelope(services.auth.reset_password(body.email))


@router.get("/session")
def get_session(services: Services = Depends(get_services)):
    """The persisted session, if any"""
    return envelope(services.auth.current_session())


@router.get("/me")
def get_me(current_user: User = Depends(get_current_user)):
    """Get current user info"""
    return envelope(ServiceResult.ok(current_user))
