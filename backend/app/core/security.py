"""
Security utilities for signing session tokens and OAuth state.
"""
from datetime import timedelta
from typing import Optional
import secrets
from jose import JWTError, jwt
from app.core.config import settings
from app.core.utils import utcnow


def create_session_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT carrying the session payload."""
    to_encode = data.copy()
    if expires_delta:
        expire = utcnow() + expires_delta
    else:
        expire = utcnow() + timedelta(days=settings.SESSION_EXPIRE_DAYS)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[dict]:
    """Decode and verify a session JWT. Returns None when invalid or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def generate_oauth_state() -> str:
    """Random opaque value for the OAuth `state` parameter."""
    return secrets.token_urlsafe(24)
