"""
Backfill created_at on expenses recorded before it was tracked.
"""
import logging
from sqlalchemy.orm import Session
from app.db.migrations.base import MigrationJob, JobKind
from app.models.expense import Expense
from app.schemas.migration import ExpenseBackfillResult
from app.core.utils import utcnow

logger = logging.getLogger(__name__)


class BackfillExpenseTimestamps(MigrationJob):
    """
    Set created_at on owned expenses that lack it.

    Expenses without an owner are left alone; the orphan purge deals with
    them. Each row is committed as soon as it is stamped, so an interrupted
    run keeps its progress and a rerun finishes the rest.
    """
    name = "backfill_expense_timestamps"
    kind = JobKind.BACKFILL
    version = 1
    description = "Set created_at on owned expenses that are missing it"

    def run(self, db: Session) -> ExpenseBackfillResult:
        expenses = db.query(Expense).order_by(Expense.id).all()
        now = utcnow()
        migrated = 0

        for expense in expenses:
            if expense.user_id is None:
                logger.debug(f"Skipping expense {expense.id} - no owner")
                continue
            if expense.created_at is not None:
                continue
            expense.created_at = now
            db.commit()
            migrated += 1

        return ExpenseBackfillResult(
            migrated_record_count=migrated,
            total_record_count=len(expenses),
        )
