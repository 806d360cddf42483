"""
Delete expenses that have no owning user.
"""
import logging
from sqlalchemy.orm import Session
from app.db.migrations.base import MigrationJob, JobKind
from app.models.expense import Expense
from app.schemas.migration import OrphanPurgeResult

logger = logging.getLogger(__name__)


class PurgeOrphanedExpenses(MigrationJob):
    """
    Permanently delete every expense whose user_id is null.

    Run after the timestamp backfill. Deletion is not reversible.
    """
    name = "purge_orphaned_expenses"
    kind = JobKind.ORPHAN_PURGE
    version = 1
    description = "Permanently delete expenses that have no owner"

    def run(self, db: Session) -> OrphanPurgeResult:
        orphaned = db.query(Expense).filter(Expense.user_id.is_(None)).order_by(Expense.id).all()
        deleted = 0

        for expense in orphaned:
            logger.debug(f"Deleting orphaned expense {expense.id}")
            db.delete(expense)
            db.commit()
            deleted += 1

        return OrphanPurgeResult(deleted_count=deleted, total_orphaned_found=len(orphaned))
