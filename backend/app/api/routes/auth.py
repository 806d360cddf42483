"""
Authentication routes for Google sign-in and logout.
"""
import logging
from urllib.parse import urlencode
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.exceptions import ExternalServiceError
from app.core.security import generate_oauth_state
from app.core.session import UserSession, save_session, clear_session
from app.db.session import get_db
from app.services import google_oauth
from app.services.user_service import get_or_create_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _login_error_redirect(code: str) -> RedirectResponse:
    """Send the browser back to the login page with an error code."""
    query = urlencode({"error": code})
    return RedirectResponse(f"{settings.FRONTEND_URL}/login?{query}", status_code=307)


@router.get("/google/login")
async def google_login():
    """Redirect to Google's consent screen."""
    return RedirectResponse(google_oauth.build_authorization_url(generate_oauth_state()), status_code=307)


@router.get("/google/callback")
def google_callback(
    code: Optional[str] = None,
    error: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Finish Google sign-in.

    The caller is a browser, so every failure becomes a redirect to the login
    page with an error code instead of an error response.
    """
    if error:
        return _login_error_redirect(error)
    if not code:
        return _login_error_redirect("no_code")

    try:
        access_token = google_oauth.exchange_code_for_token(code)
        identity = google_oauth.fetch_user_info(access_token)
        user = get_or_create_user(db, identity)
    except ExternalServiceError as e:
        return _login_error_redirect(e.code)
    except Exception as e:
        logger.error(f"Google OAuth callback error: {e}", exc_info=True)
        return _login_error_redirect("callback_error")

    response = RedirectResponse(f"{settings.FRONTEND_URL}/auth-success", status_code=307)
    save_session(response, UserSession.from_user(user))
    return response


@router.post("/logout")
async def logout():
    """Clear the session cookie."""
    response = RedirectResponse(f"{settings.FRONTEND_URL}/login", status_code=303)
    clear_session(response)
    return response
