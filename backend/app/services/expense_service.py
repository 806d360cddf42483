"""
Expense service for expense-related business logic.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from app.models.expense import Expense
from app.models.user import User
from app.schemas.expense import ExpenseCreate
from app.core.exceptions import NotFoundError
from app.core.utils import utcnow

logger = logging.getLogger(__name__)


def add_expense(db: Session, owner_user_id: int, data: ExpenseCreate) -> Expense:
    """
    Insert a new expense owned by `owner_user_id`.

    Only the owner's existence is checked here; amount, date and category are
    validated by the request schema.
    """
    owner = db.query(User).filter(User.id == owner_user_id).first()
    if not owner:
        raise NotFoundError(f"User {owner_user_id} not found")

    expense = Expense(
        user_id=owner.id,
        amount=data.amount,
        category=data.category,
        description=data.description,
        date=data.date,
        created_at=utcnow(),
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    logger.info(f"User {owner.id} added expense {expense.id}")
    return expense


def get_expenses_for_user(db: Session, user_id: int) -> List[Expense]:
    """All expenses of one user, newest date first."""
    return db.query(Expense).filter(
        Expense.user_id == user_id
    ).order_by(Expense.date.desc(), Expense.id.desc()).all()


def get_all_expenses(db: Session) -> List[Expense]:
    """Every expense across all users, newest date first. Admin inspection only."""
    return db.query(Expense).order_by(Expense.date.desc(), Expense.id.desc()).all()
