from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
import logging

from rentease.core.config import settings
from rentease.models.user import User
from rentease.services import Services
from rentease.storage import KeyValueStore, StoreBackend, build_store

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


@lru_cache()
def get_store() -> KeyValueStore:
    """Process-wide store built from STORE_BACKEND"""
    if settings.STORE_BACKEND.lower() == StoreBackend.SQL.value:
        from rentease.database import SessionLocal

        return build_store(StoreBackend.SQL.value, SessionLocal)
    return build_store(settings.STORE_BACKEND)


def get_services() -> Services:
    """Services wired to the configured store; tests override this dependency."""
    return Services(get_store(), settings)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    services: Services = Depends(get_services),
) -> User:
    """
    Get current user from the bearer token.
    Returns 401 if token is invalid or user not found.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    result = services.auth.resolve_token(token)
    if not result.success:
        logger.warning(f"Token rejected: {result.message}")
        raise credentials_exception

    return result.data
