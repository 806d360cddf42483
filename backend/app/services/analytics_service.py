"""
Spending analytics over a user's expenses.

Aggregation happens in Python over the already-loaded rows; a user's data set
is personal-scale, so no grouping is pushed down to the database.
"""
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from app.core.utils import round_money, month_key, parse_month, days_in_month, shift_month
from app.schemas.analytics import (
    CategoryBreakdownItem,
    DailyTrendItem,
    MonthlyTrendItem,
    SpendingSummaryResponse,
)
from app.schemas.expense import EXPENSE_CATEGORIES

TREND_MONTHS = 6
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _sum(expenses) -> Decimal:
    return sum((Decimal(e.amount) for e in expenses), Decimal(0))


def category_breakdown(expenses: List) -> List[CategoryBreakdownItem]:
    """Totals per known category, in category order, skipping empty ones."""
    by_category = defaultdict(list)
    for expense in expenses:
        by_category[expense.category].append(expense)

    known_total = _sum(e for cat in EXPENSE_CATEGORIES for e in by_category.get(cat, []))
    items = []
    for category in EXPENSE_CATEGORIES:
        total = _sum(by_category.get(category, []))
        if total <= 0:
            continue
        percentage = float(total / known_total * 100) if known_total else 0.0
        items.append(CategoryBreakdownItem(
            category=category,
            total_amount=round_money(total),
            expense_count=len(by_category[category]),
            percentage=round(percentage, 2),
        ))
    return items


def monthly_trend(expenses: List, today: date) -> List[MonthlyTrendItem]:
    """Totals for the last six calendar months ending with today's month, oldest first."""
    totals = defaultdict(Decimal)
    for expense in expenses:
        totals[expense.date[:7]] += Decimal(expense.amount)

    items = []
    for offset in range(TREND_MONTHS - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        key = f"{year:04d}-{month:02d}"
        items.append(MonthlyTrendItem(
            month=key,
            label=MONTH_LABELS[month - 1],
            amount=round_money(totals.get(key, Decimal(0))),
        ))
    return items


def daily_trend(month_expenses: List, month: str) -> List[DailyTrendItem]:
    """One entry per calendar day of `month`, zero-filled."""
    year, month_number = parse_month(month)
    totals = defaultdict(Decimal)
    for expense in month_expenses:
        totals[expense.date] += Decimal(expense.amount)

    items = []
    for day in range(1, days_in_month(year, month_number) + 1):
        date_str = f"{month}-{day:02d}"
        items.append(DailyTrendItem(
            day=day,
            date=date_str,
            amount=round_money(totals.get(date_str, Decimal(0))),
        ))
    return items


def available_months(expenses: List, today: date) -> List[str]:
    """Distinct months with expenses plus the current month, newest first."""
    months = {expense.date[:7] for expense in expenses}
    months.add(month_key(today))
    return sorted(months, reverse=True)


def build_summary(expenses: Iterable, month: Optional[str] = None,
                  today: Optional[date] = None) -> SpendingSummaryResponse:
    """
    Build the spending summary for one month.

    Args:
        expenses: Expense rows (anything with amount, category and date).
        month: Selected month as YYYY-MM; defaults to today's month.
        today: Reference date for the trend window; defaults to date.today().

    Raises:
        ValueError: If `month` is not a valid YYYY-MM string.
    """
    expenses = list(expenses)
    today = today or date.today()
    month = month or month_key(today)
    year, month_number = parse_month(month)
    month = f"{year:04d}-{month_number:02d}"

    month_expenses = [e for e in expenses if e.date.startswith(month)]
    month_total = _sum(month_expenses)

    return SpendingSummaryResponse(
        month=month,
        total_amount=round_money(_sum(expenses)),
        month_total=round_money(month_total),
        daily_average=round_money(month_total / days_in_month(year, month_number)),
        expense_count=len(month_expenses),
        categories=category_breakdown(month_expenses),
        monthly_trend=monthly_trend(expenses, today),
        daily_trend=daily_trend(month_expenses, month),
        available_months=available_months(expenses, today),
    )
