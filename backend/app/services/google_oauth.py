"""
Google OAuth client: authorization URL, code exchange and profile fetch.
"""
from urllib.parse import urlencode
import httpx
from pydantic import ValidationError
import logging
from app.core.config import settings
from app.core.exceptions import ExternalServiceError
from app.schemas.user import GoogleIdentity

logger = logging.getLogger(__name__)

GOOGLE_SCOPES = " ".join(["openid", "email", "profile"])


def build_authorization_url(state: str) -> str:
    """URL that sends the browser to Google's consent screen."""
    params = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "redirect_uri": settings.GOOGLE_REDIRECT_URI,
        "response_type": "code",
        "scope": GOOGLE_SCOPES,
        "state": state,
        "access_type": "offline",
        "prompt": "consent",
    }
    return f"{settings.GOOGLE_AUTH_URL}?{urlencode(params)}"


def exchange_code_for_token(code: str) -> str:
    """
    Exchange an authorization code for an access token.

    Raises:
        ExternalServiceError: code ``token_exchange_failed`` on any HTTP failure
            or a response without an access token.
    """
    try:
        response = httpx.post(
            settings.GOOGLE_TOKEN_URL,
            data={
                "client_id": settings.GOOGLE_CLIENT_ID,
                "client_secret": settings.GOOGLE_CLIENT_SECRET,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": settings.GOOGLE_REDIRECT_URI,
            },
            timeout=settings.GOOGLE_HTTP_TIMEOUT,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"Token exchange failed: {e.response.status_code} - {e.response.text}")
        raise ExternalServiceError("token_exchange_failed", f"Google token endpoint returned {e.response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"Token exchange network error: {e}")
        raise ExternalServiceError("token_exchange_failed", str(e))

    access_token = response.json().get("access_token")
    if not access_token:
        logger.error("Token exchange response carried no access_token")
        raise ExternalServiceError("token_exchange_failed", "No access token in response")
    return access_token


def fetch_user_info(access_token: str) -> GoogleIdentity:
    """
    Fetch the signed-in user's profile.

    Raises:
        ExternalServiceError: code ``user_info_failed`` on any HTTP failure or
            a profile missing email or id.
    """
    try:
        response = httpx.get(
            settings.GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=settings.GOOGLE_HTTP_TIMEOUT,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"User info fetch failed: {e.response.status_code} - {e.response.text}")
        raise ExternalServiceError("user_info_failed", f"Google userinfo endpoint returned {e.response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"User info network error: {e}")
        raise ExternalServiceError("user_info_failed", str(e))

    data = response.json()
    if not data.get("email") or not data.get("id"):
        logger.error(f"User info response missing email or id: {list(data.keys())}")
        raise ExternalServiceError("user_info_failed", "Incomplete profile")

    try:
        return GoogleIdentity(
            email=data["email"],
            name=data.get("name") or data["email"].split("@")[0],
            picture=data.get("picture"),
            google_id=str(data["id"]),
        )
    except ValidationError as e:
        logger.error(f"User info response failed validation: {e}")
        raise ExternalServiceError("user_info_failed", "Invalid profile")
