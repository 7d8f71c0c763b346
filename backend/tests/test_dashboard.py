from datetime import date, datetime, timedelta

from expense_tracker.models import TransactionType
from expense_tracker.services import DashboardService
from expense_tracker.services.dashboard_service import percentage_of

from .helpers import add_transaction, default_category


def test_totals_and_balance(session, user) -> None:
    salary = default_category(session, "Salary", TransactionType.INCOME)
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    add_transaction(session, user.id, 100, TransactionType.INCOME, salary, datetime(2025, 1, 1))
    add_transaction(session, user.id, 50, TransactionType.INCOME, salary, datetime(2025, 1, 2))
    add_transaction(session, user.id, 30, TransactionType.EXPENSE, food, datetime(2025, 1, 3))

    snapshot = DashboardService(session, user.id).snapshot()

    assert snapshot["total_income"] == 150
    assert snapshot["total_expense"] == 30
    assert snapshot["balance"] == 120
    assert snapshot["transaction_count"] == 3


def test_balance_may_be_negative(session, user) -> None:
    salary = default_category(session, "Salary", TransactionType.INCOME)
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    add_transaction(session, user.id, 20, TransactionType.INCOME, salary, datetime(2025, 1, 1))
    add_transaction(session, user.id, 75.5, TransactionType.EXPENSE, food, datetime(2025, 1, 2))

    snapshot = DashboardService(session, user.id).snapshot()
    assert snapshot["balance"] == -55.5


def test_empty_dashboard(session, user) -> None:
    snapshot = DashboardService(session, user.id).snapshot()

    assert snapshot["total_income"] == 0
    assert snapshot["total_expense"] == 0
    assert snapshot["balance"] == 0
    assert snapshot["transaction_count"] == 0
    assert snapshot["category_breakdown"] == []
    assert snapshot["recent_transactions"] == []


def test_breakdown_percentages_are_per_type(session, user) -> None:
    salary = default_category(session, "Salary", TransactionType.INCOME)
    freelance = default_category(session, "Freelance", TransactionType.INCOME)
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    transport = default_category(session, "Transportation", TransactionType.EXPENSE)

    add_transaction(session, user.id, 100, TransactionType.INCOME, salary, datetime(2025, 1, 1))
    add_transaction(session, user.id, 50, TransactionType.INCOME, freelance, datetime(2025, 1, 2))
    add_transaction(session, user.id, 10, TransactionType.EXPENSE, food, datetime(2025, 1, 3))
    add_transaction(session, user.id, 20, TransactionType.EXPENSE, food, datetime(2025, 1, 4))
    add_transaction(session, user.id, 10, TransactionType.EXPENSE, transport, datetime(2025, 1, 5))

    breakdown = DashboardService(session, user.id).snapshot()["category_breakdown"]
    by_name = {row["category_name"]: row for row in breakdown}

    assert len(breakdown) == 4
    assert by_name["Food & Dining"]["total_amount"] == 30
    assert by_name["Food & Dining"]["count"] == 2
    assert by_name["Food & Dining"]["percentage"] == 75.0
    assert by_name["Transportation"]["percentage"] == 25.0
    assert by_name["Food & Dining"]["category_icon"] == food.icon

    income_share = sum(r["percentage"] for r in breakdown if r["category_type"] == TransactionType.INCOME)
    expense_share = sum(r["percentage"] for r in breakdown if r["category_type"] == TransactionType.EXPENSE)
    assert abs(income_share - 100) < 0.05
    assert abs(expense_share - 100) < 0.05

    # Largest first
    totals = [row["total_amount"] for row in breakdown]
    assert totals == sorted(totals, reverse=True)


def test_breakdown_omits_unused_categories(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    add_transaction(session, user.id, 12, TransactionType.EXPENSE, food, datetime(2025, 1, 1))

    breakdown = DashboardService(session, user.id).snapshot()["category_breakdown"]
    assert [row["category_id"] for row in breakdown] == [food.id]
    assert breakdown[0]["percentage"] == 100.0


def test_percentage_is_zero_when_type_total_is_zero() -> None:
    assert percentage_of(0, 0) == 0.0
    assert percentage_of(500, 0) == 0.0
    assert percentage_of(1, 3) == 33.33


def test_recent_transactions_are_capped_and_newest_first(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    base = datetime(2025, 6, 1)
    for i in range(7):
        add_transaction(session, user.id, 1 + i, TransactionType.EXPENSE, food, base + timedelta(days=i))

    recent = DashboardService(session, user.id).snapshot()["recent_transactions"]

    assert len(recent) == 5
    dates = [tx.date for tx in recent]
    assert dates == sorted(dates, reverse=True)
    assert recent[0].date == base + timedelta(days=6)
    assert recent[0].category.name == "Food & Dining"


def test_reporting_period_limits_the_snapshot(session, user) -> None:
    salary = default_category(session, "Salary", TransactionType.INCOME)
    add_transaction(session, user.id, 100, TransactionType.INCOME, salary, datetime(2025, 1, 31, 23, 0))
    add_transaction(session, user.id, 200, TransactionType.INCOME, salary, datetime(2025, 2, 1))

    snapshot = DashboardService(session, user.id).snapshot(
        start_date=date(2025, 1, 1), end_date=date(2025, 1, 31)
    )
    assert snapshot["total_income"] == 100
    assert snapshot["transaction_count"] == 1


def test_dashboard_ignores_other_users(session, user, other_user) -> None:
    salary = default_category(session, "Salary", TransactionType.INCOME)
    add_transaction(session, user.id, 10, TransactionType.INCOME, salary, datetime(2025, 1, 1))
    add_transaction(session, other_user.id, 1000, TransactionType.INCOME, salary, datetime(2025, 1, 1))

    snapshot = DashboardService(session, user.id).snapshot()
    assert snapshot["total_income"] == 10
    assert snapshot["transaction_count"] == 1
