"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.models.user import User
from app.schemas.expense import ExpenseCreate, ExpenseResponse, EXPENSE_CATEGORIES
from app.schemas.analytics import SpendingSummaryResponse
from app.api.dependencies import get_current_user
from app.core.exceptions import NotFoundError
from app.services import expense_service
from app.services.analytics_service import build_summary

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse])
def list_my_expenses(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the current user's expenses, newest first."""
    return expense_service.get_expenses_for_user(db, current_user.id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record a new expense for the current user."""
    try:
        return expense_service.add_expense(db, current_user.id, expense_data)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("/categories", response_model=List[str])
async def list_categories():
    """Categories an expense may be filed under."""
    return EXPENSE_CATEGORIES


@router.get("/summary", response_model=SpendingSummaryResponse)
def get_spending_summary(
    month: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}$"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Totals, trends and category breakdown for the selected month (YYYY-MM)."""
    expenses = expense_service.get_expenses_for_user(db, current_user.id)
    try:
        return build_summary(expenses, month=month)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid month: {e}"
        )
