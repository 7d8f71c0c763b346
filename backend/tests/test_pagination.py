from datetime import date, datetime, timedelta

import pytest

from expense_tracker.models import TransactionType
from expense_tracker.services import TransactionFilter, TransactionService, count_pages
from expense_tracker.services.transaction_service import day_bounds

from .helpers import add_transaction, default_category


@pytest.mark.parametrize(
    "total, limit, expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (7, 1, 7)],
)
def test_count_pages_is_ceiling_division(total, limit, expected) -> None:
    assert count_pages(total, limit) == expected


def test_count_pages_rejects_zero_limit() -> None:
    with pytest.raises(ValueError):
        count_pages(5, 0)


def test_day_bounds_cover_whole_end_day() -> None:
    start, end = day_bounds(date(2025, 1, 3), date(2025, 1, 5))
    assert start == datetime(2025, 1, 3)
    assert end == datetime(2025, 1, 6)
    assert day_bounds(None, None) == (None, None)


def test_unfiltered_listing_returns_everything_newest_first(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    base = datetime(2025, 1, 1, 12, 0)
    for i in range(25):
        add_transaction(session, user.id, 10 + i, TransactionType.EXPENSE, food, base + timedelta(days=i))

    service = TransactionService(session, user.id)
    seen = []
    for page in (1, 2, 3):
        rows, total = service.list_transactions(TransactionFilter(page=page, limit=10))
        assert total == 25
        seen.extend(rows)

    assert len(seen) == 25
    dates = [tx.date for tx in seen]
    assert dates == sorted(dates, reverse=True)
    assert seen[0].date == base + timedelta(days=24)


def test_page_past_the_end_is_empty_not_an_error(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    for i in range(3):
        add_transaction(session, user.id, 5, TransactionType.EXPENSE, food, datetime(2025, 2, 1 + i))

    rows, total = TransactionService(session, user.id).list_transactions(
        TransactionFilter(page=9, limit=10)
    )
    assert rows == []
    assert total == 3


def test_date_range_is_inclusive_on_both_ends(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    for day in range(1, 11):
        add_transaction(session, user.id, day, TransactionType.EXPENSE, food, datetime(2025, 1, day, 18, 30))

    rows, total = TransactionService(session, user.id).list_transactions(
        TransactionFilter(start_date=date(2025, 1, 3), end_date=date(2025, 1, 5))
    )
    assert total == 3
    assert {tx.date.day for tx in rows} == {3, 4, 5}
    for tx in rows:
        assert datetime(2025, 1, 3) <= tx.date < datetime(2025, 1, 6)


def test_open_ended_ranges(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    for day in range(1, 6):
        add_transaction(session, user.id, day, TransactionType.EXPENSE, food, datetime(2025, 3, day))

    service = TransactionService(session, user.id)
    _, after = service.list_transactions(TransactionFilter(start_date=date(2025, 3, 4)))
    _, before = service.list_transactions(TransactionFilter(end_date=date(2025, 3, 2)))
    assert after == 2
    assert before == 2


def test_filters_combine_with_and(session, user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    shopping = default_category(session, "Shopping", TransactionType.EXPENSE)
    salary = default_category(session, "Salary", TransactionType.INCOME)

    add_transaction(session, user.id, 10, TransactionType.EXPENSE, food, datetime(2025, 4, 1))
    add_transaction(session, user.id, 20, TransactionType.EXPENSE, food, datetime(2025, 5, 1))
    add_transaction(session, user.id, 30, TransactionType.EXPENSE, shopping, datetime(2025, 4, 2))
    add_transaction(session, user.id, 900, TransactionType.INCOME, salary, datetime(2025, 4, 3))

    service = TransactionService(session, user.id)

    _, expenses = service.list_transactions(TransactionFilter(type=TransactionType.EXPENSE))
    assert expenses == 3

    rows, total = service.list_transactions(
        TransactionFilter(
            type=TransactionType.EXPENSE,
            category_id=food.id,
            start_date=date(2025, 4, 1),
            end_date=date(2025, 4, 30),
        )
    )
    assert total == 1
    assert rows[0].amount == 10


def test_listing_is_scoped_to_the_user(session, user, other_user) -> None:
    food = default_category(session, "Food & Dining", TransactionType.EXPENSE)
    add_transaction(session, user.id, 10, TransactionType.EXPENSE, food, datetime(2025, 1, 1))
    add_transaction(session, other_user.id, 99, TransactionType.EXPENSE, food, datetime(2025, 1, 2))

    rows, total = TransactionService(session, user.id).list_transactions(TransactionFilter())
    assert total == 1
    assert rows[0].user_id == user.id
