"""
User service: resolving external identities to local accounts.
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.user import GoogleIdentity
from app.core.utils import utcnow

logger = logging.getLogger(__name__)

GOOGLE_PROVIDER = "google"


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_by_google_id(db: Session, google_id: str) -> Optional[User]:
    return db.query(User).filter(User.google_id == google_id).first()


def get_or_create_user(db: Session, identity: GoogleIdentity) -> User:
    """
    Return the local user for a Google identity, creating it if absent.

    The insert is attempted first and the unique constraints on email and
    google_id decide whether the account already exists, so two concurrent
    first logins cannot both create a row. On conflict the existing row is
    found by email, then by google id, and its profile fields are refreshed.

    A row matched by email whose google_id differs gets the new google_id;
    both Google accounts then resolve to the same local user.
    """
    new_user = User(
        email=identity.email,
        name=identity.name,
        picture=identity.picture,
        is_verified=True,
        created_at=utcnow(),
        provider=GOOGLE_PROVIDER,
        google_id=identity.google_id,
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        conflict = exc
        logger.debug(f"User for {identity.email} already exists, refreshing profile")
    else:
        db.refresh(new_user)
        logger.info(f"Created user {new_user.id} for {identity.email}")
        return new_user

    existing_user = get_user_by_email(db, identity.email)
    if existing_user is None:
        existing_user = get_user_by_google_id(db, identity.google_id)
    if existing_user is None:
        # Conflict came from something other than email or google_id
        raise conflict

    if existing_user.google_id and existing_user.google_id != identity.google_id:
        logger.warning(
            f"User {existing_user.id} google_id changes from {existing_user.google_id} "
            f"to {identity.google_id}"
        )

    existing_user.name = identity.name
    existing_user.picture = identity.picture
    existing_user.google_id = identity.google_id
    existing_user.is_verified = True
    existing_user.provider = GOOGLE_PROVIDER
    db.commit()
    db.refresh(existing_user)
    return existing_user
