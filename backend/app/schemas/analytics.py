"""
Pydantic schemas for spending analytics.
"""
from pydantic import BaseModel
from typing import List
from decimal import Decimal


class CategoryBreakdownItem(BaseModel):
    """Spending in one category for the selected month."""
    category: str
    total_amount: Decimal
    expense_count: int
    percentage: float  # Share of the month's total (0-100)


class MonthlyTrendItem(BaseModel):
    month: str  # YYYY-MM
    label: str  # Short month name, e.g. "Jan"
    amount: Decimal


class DailyTrendItem(BaseModel):
    day: int
    date: str  # YYYY-MM-DD
    amount: Decimal


class SpendingSummaryResponse(BaseModel):
    """Aggregated spending for one user and one selected month."""
    month: str
    total_amount: Decimal
    month_total: Decimal
    daily_average: Decimal
    expense_count: int
    categories: List[CategoryBreakdownItem]
    monthly_trend: List[MonthlyTrendItem]
    daily_trend: List[DailyTrendItem]
    available_months: List[str]
