"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

EXPENSE_CATEGORIES = [
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    "Travel",
    "Other",
]


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    category: str
    description: str = ""
    date: str  # YYYY-MM-DD

    @field_validator("category")
    @classmethod
    def check_category(cls, v):
        if v not in EXPENSE_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(EXPENSE_CATEGORIES)}")
        return v

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        # Stored as a plain string; must still name a real calendar day
        try:
            parsed = datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError("date must be formatted as YYYY-MM-DD")
        if parsed.strftime("%Y-%m-%d") != v:
            raise ValueError("date must be formatted as YYYY-MM-DD")
        return v


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    user_id: Optional[int] = None
    amount: Decimal
    category: str
    description: str
    date: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
