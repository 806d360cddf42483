"""
Tests for spending analytics.
"""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace
import pytest
from app.services.analytics_service import build_summary

TODAY = date(2024, 3, 15)


def _expense(amount, category, day):
    return SimpleNamespace(amount=Decimal(amount), category=category, date=day)


@pytest.fixture
def expenses():
    return [
        _expense("30.00", "Food & Dining", "2024-03-01"),
        _expense("10.00", "Food & Dining", "2024-03-01"),
        _expense("60.00", "Travel", "2024-03-20"),
        _expense("15.50", "Shopping", "2024-02-10"),
        _expense("99.00", "Other", "2023-08-05"),
    ]


def test_month_totals_and_daily_average(expenses):
    """Test the selected month's total and daily average."""
    summary = build_summary(expenses, month="2024-03", today=TODAY)

    assert summary.total_amount == Decimal("214.50")
    assert summary.month_total == Decimal("100.00")
    assert summary.expense_count == 3
    assert summary.daily_average == Decimal("3.23")  # 100 / 31


def test_category_breakdown(expenses):
    """Test categories come in fixed order with counts and shares."""
    summary = build_summary(expenses, month="2024-03", today=TODAY)

    assert [c.category for c in summary.categories] == ["Food & Dining", "Travel"]
    food = summary.categories[0]
    assert food.total_amount == Decimal("40.00")
    assert food.expense_count == 2
    assert food.percentage == 40.0


def test_monthly_trend_covers_last_six_months(expenses):
    """Test the trend window ends at today's month, oldest first."""
    summary = build_summary(expenses, month="2024-03", today=TODAY)

    assert [m.month for m in summary.monthly_trend] == [
        "2023-10", "2023-11", "2023-12", "2024-01", "2024-02", "2024-03"
    ]
    assert summary.monthly_trend[0].label == "Oct"
    assert summary.monthly_trend[-2].amount == Decimal("15.50")
    assert summary.monthly_trend[-1].amount == Decimal("100.00")


def test_daily_trend_is_zero_filled(expenses):
    """Test one entry per day of the month, including empty days."""
    summary = build_summary(expenses, month="2024-02", today=TODAY)

    assert len(summary.daily_trend) == 29
    assert summary.daily_trend[9].date == "2024-02-10"
    assert summary.daily_trend[9].amount == Decimal("15.50")
    assert summary.daily_trend[0].amount == Decimal("0.00")


def test_available_months_include_current(expenses):
    """Test months with data plus the current month, newest first."""
    summary = build_summary(expenses, today=date(2024, 5, 2))

    assert summary.month == "2024-05"
    assert summary.available_months == ["2024-05", "2024-03", "2024-02", "2023-08"]


def test_empty_month():
    """Test a month without expenses yields zeroes."""
    summary = build_summary([], month="2024-03", today=TODAY)

    assert summary.month_total == Decimal("0.00")
    assert summary.daily_average == Decimal("0.00")
    assert summary.categories == []


def test_invalid_month():
    """Test a malformed month is rejected."""
    with pytest.raises(ValueError):
        build_summary([], month="2024-13", today=TODAY)


def test_summary_endpoint(auth_client, user, make_expense):
    """Test GET /api/expenses/summary aggregates the caller's expenses."""
    make_expense(user_id=user.id, amount="20.00", category="Healthcare", date="2024-03-04")
    make_expense(user_id=user.id, amount="5.00", category="Healthcare", date="2024-03-05")

    response = auth_client.get("/api/expenses/summary?month=2024-03")

    assert response.status_code == 200
    body = response.json()
    assert body["month"] == "2024-03"
    assert Decimal(body["month_total"]) == Decimal("25.00")
    assert body["categories"][0]["category"] == "Healthcare"
    assert body["categories"][0]["expense_count"] == 2
