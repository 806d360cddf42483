"""
Backfill profile fields on users created before Google sign-in.
"""
import logging
from sqlalchemy.orm import Session
from app.db.migrations.base import MigrationJob, JobKind
from app.models.user import User
from app.schemas.migration import UserBackfillResult

logger = logging.getLogger(__name__)

LEGACY_PROVIDER = "legacy"


class BackfillLegacyUsers(MigrationJob):
    """Fill a missing name from the email local part and tag missing providers as legacy."""
    name = "backfill_legacy_users"
    kind = JobKind.BACKFILL
    version = 1
    description = "Fill missing user names from email and mark missing providers as legacy"

    def run(self, db: Session) -> UserBackfillResult:
        users = db.query(User).order_by(User.id).all()
        updated = 0

        for user in users:
            changed = False
            if not user.name:
                user.name = user.email.split("@")[0]
                changed = True
            if not user.provider:
                user.provider = LEGACY_PROVIDER
                changed = True
            if changed:
                db.commit()
                updated += 1
                logger.debug(f"Backfilled legacy user {user.id}")

        return UserBackfillResult(users_updated=updated, total_users=len(users))
