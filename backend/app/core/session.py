"""
Explicit per-request user session.

The session is loaded from the request at the start of handling and saved to
the response at the end; nothing about the logged-in user is kept globally.
"""
import logging
from typing import Optional

from fastapi import Request, Response
from pydantic import BaseModel

from app.core.config import settings
from app.core.security import create_session_token, decode_session_token

logger = logging.getLogger(__name__)


class UserSession(BaseModel):
    """Identity of the logged-in user as carried between requests."""
    user_id: int
    email: str
    name: Optional[str] = None
    picture: Optional[str] = None

    @classmethod
    def from_user(cls, user) -> "UserSession":
        return cls(user_id=user.id, email=user.email, name=user.name, picture=user.picture)

    def to_token(self) -> str:
        payload = self.model_dump()
        payload["sub"] = str(self.user_id)
        return create_session_token(payload)

    @classmethod
    def from_token(cls, token: str) -> Optional["UserSession"]:
        payload = decode_session_token(token)
        if not payload or "user_id" not in payload:
            return None
        return cls(
            user_id=payload["user_id"],
            email=payload.get("email", ""),
            name=payload.get("name"),
            picture=payload.get("picture"),
        )


def _read_token(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    auth_header = request.headers.get("Authorization", "")
    if auth_header.lower().startswith("bearer "):
        return auth_header[7:].strip() or None
    return None


def load_session(request: Request) -> Optional[UserSession]:
    """Load the session from the cookie or bearer header, if any."""
    token = _read_token(request)
    if not token:
        return None
    session = UserSession.from_token(token)
    if session is None:
        logger.debug("Ignoring invalid or expired session token")
    return session


def save_session(response: Response, session: UserSession) -> str:
    """Write the session cookie onto the response and return the token."""
    token = session.to_token()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return token


def clear_session(response: Response) -> None:
    """Remove the session cookie."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
