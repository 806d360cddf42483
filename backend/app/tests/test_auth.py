"""
Tests for Google sign-in, logout and the current-user endpoint.
"""
from datetime import timedelta
from urllib.parse import urlparse, parse_qs
from app.core.config import settings
from app.core.exceptions import ExternalServiceError
from app.core.security import create_session_token
from app.models.user import User
from app.schemas.user import GoogleIdentity
from app.services import google_oauth


def _stub_google(monkeypatch, token_error=None, profile_error=None):
    def fake_exchange(code):
        if token_error:
            raise token_error
        assert code == "auth-code"
        return "access-token"

    def fake_fetch(access_token):
        if profile_error:
            raise profile_error
        assert access_token == "access-token"
        return GoogleIdentity(
            email="frank@example.com",
            name="Frank",
            picture="https://example.com/frank.png",
            google_id="google-frank",
        )

    monkeypatch.setattr(google_oauth, "exchange_code_for_token", fake_exchange)
    monkeypatch.setattr(google_oauth, "fetch_user_info", fake_fetch)


def _error_code(response):
    location = urlparse(response.headers["location"])
    assert location.path == "/login"
    return parse_qs(location.query)["error"][0]


def test_login_redirects_to_google(client):
    """Test the login route builds Google's authorization URL."""
    response = client.get("/api/auth/google/login", follow_redirects=False)

    assert response.status_code == 307
    location = urlparse(response.headers["location"])
    params = parse_qs(location.query)
    assert response.headers["location"].startswith(settings.GOOGLE_AUTH_URL)
    assert params["response_type"] == ["code"]
    assert params["scope"] == ["openid email profile"]
    assert params["redirect_uri"] == [settings.GOOGLE_REDIRECT_URI]
    assert params["state"][0]


def test_callback_creates_user_and_session(client, db, monkeypatch):
    """Test a successful callback resolves the user and sets the session cookie."""
    _stub_google(monkeypatch)

    response = client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == f"{settings.FRONTEND_URL}/auth-success"
    assert settings.SESSION_COOKIE_NAME in response.headers["set-cookie"]
    user = db.query(User).filter(User.email == "frank@example.com").one()
    assert user.google_id == "google-frank"


def test_callback_twice_keeps_one_user(client, db, monkeypatch):
    """Test logging in twice does not duplicate the account."""
    _stub_google(monkeypatch)

    client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)
    client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)

    assert db.query(User).count() == 1


def test_callback_without_code(client):
    """Test a callback with no code redirects with no_code."""
    response = client.get("/api/auth/google/callback", follow_redirects=False)

    assert _error_code(response) == "no_code"


def test_callback_forwards_provider_error(client):
    """Test an error from Google is passed through to the login page."""
    response = client.get("/api/auth/google/callback?error=access_denied", follow_redirects=False)

    assert _error_code(response) == "access_denied"


def test_callback_token_exchange_failure(client, db, monkeypatch):
    """Test a failed token exchange redirects with token_exchange_failed."""
    _stub_google(monkeypatch, token_error=ExternalServiceError("token_exchange_failed"))

    response = client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)

    assert _error_code(response) == "token_exchange_failed"
    assert db.query(User).count() == 0


def test_callback_user_info_failure(client, monkeypatch):
    """Test a failed profile fetch redirects with user_info_failed."""
    _stub_google(monkeypatch, profile_error=ExternalServiceError("user_info_failed"))

    response = client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)

    assert _error_code(response) == "user_info_failed"


def test_callback_unexpected_error(client, monkeypatch):
    """Test any other failure redirects with callback_error."""
    _stub_google(monkeypatch, profile_error=RuntimeError("boom"))

    response = client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)

    assert _error_code(response) == "callback_error"


def test_me_with_session(auth_client, user):
    """Test /users/me returns the session user."""
    response = auth_client.get("/api/users/me")

    assert response.status_code == 200
    assert response.json()["email"] == user.email
    assert response.json()["id"] == user.id


def test_me_without_session(client):
    """Test /users/me rejects anonymous callers."""
    assert client.get("/api/users/me").status_code == 401


def test_me_with_expired_session(client, user):
    """Test an expired session token is treated as no session."""
    token = create_session_token({"user_id": user.id, "email": user.email}, expires_delta=timedelta(seconds=-1))

    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_me_for_deleted_user(client, db, user):
    """Test a session whose user no longer exists is rejected."""
    token_headers = {"Authorization": f"Bearer {create_session_token({'user_id': user.id + 100, 'email': 'x@example.com'})}"}

    assert client.get("/api/users/me", headers=token_headers).status_code == 401


def test_session_cookie_round_trip(client, db, monkeypatch):
    """Test the cookie set by the callback authenticates later requests."""
    _stub_google(monkeypatch)

    callback = client.get("/api/auth/google/callback?code=auth-code", follow_redirects=False)
    token = callback.cookies[settings.SESSION_COOKIE_NAME]
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == "frank@example.com"


def test_logout_clears_cookie(client):
    """Test logout expires the session cookie."""
    response = client.post("/api/auth/logout", follow_redirects=False)

    assert response.status_code == 303
    assert settings.SESSION_COOKIE_NAME in response.headers["set-cookie"]
