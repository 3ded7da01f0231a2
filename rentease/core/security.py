"""
Session Tokens
Signs and decodes the bearer tokens handed out by the session shim.
These tokens identify a session; they are not proof of verified credentials.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from jose import JWTError, jwt

from rentease.core.config import settings

logger = logging.getLogger(__name__)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    issued_at = datetime.now(timezone.utc)

    if expires_delta:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"iat": issued_at, "exp": expire})

    return jwt.encode(
        to_encode,
        secret_key or settings.SECRET_KEY,
        algorithm=algorithm or settings.ALGORITHM,
    )


def decode_access_token(
    token: str,
    secret_key: Optional[str] = None,
    algorithm: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Decode a token; returns None when it is malformed, tampered with or expired"""
    try:
        return jwt.decode(
            token,
            secret_key or settings.SECRET_KEY,
            algorithms=[algorithm or settings.ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None
