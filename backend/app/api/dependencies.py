"""
Shared FastAPI dependencies.
"""
from typing import Optional
from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.session import UserSession, load_session
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import get_user


def get_current_session(request: Request) -> UserSession:
    """Session of the calling user; 401 when there is none."""
    session = load_session(request)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session


def get_current_user(
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db)
) -> User:
    """User record behind the current session."""
    user = get_user(db, session.user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session user no longer exists"
        )
    return user


def require_admin(x_admin_token: Optional[str] = Header(None)) -> None:
    """Guard for the admin surface, enforced only when ADMIN_TOKEN is set."""
    if settings.ADMIN_TOKEN and x_admin_token != settings.ADMIN_TOKEN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin token"
        )
