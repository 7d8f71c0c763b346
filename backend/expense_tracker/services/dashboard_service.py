from datetime import date
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func, case

from ..models import Transaction, TransactionType, Category
from .transaction_service import day_bounds

RECENT_LIMIT = 5


def percentage_of(part_cents: int, total_cents: int) -> float:
    """Share of `total_cents` in percent, 0 when the total is 0."""
    if total_cents <= 0:
        return 0.0
    return round(100.0 * part_cents / total_cents, 2)


class DashboardService:
    """Read-only summary statistics over one user's transactions."""

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _base_query(self, start_date: date | None, end_date: date | None):
        query = self.db.query(Transaction).filter(Transaction.user_id == self.user_id)

        start, end = day_bounds(start_date, end_date)
        if start is not None:
            query = query.filter(Transaction.date >= start)
        if end is not None:
            query = query.filter(Transaction.date < end)
        return query

    @staticmethod
    def _income_expense_columns():
        income = func.coalesce(
            func.sum(case((Transaction.type == TransactionType.INCOME, Transaction.amount_cents))),
            0,
        ).label("income_cents")
        expense = func.coalesce(
            func.sum(case((Transaction.type == TransactionType.EXPENSE, Transaction.amount_cents))),
            0,
        ).label("expense_cents")
        return income, expense

    def totals(self, start_date: date | None = None, end_date: date | None = None) -> dict:
        income, expense = self._income_expense_columns()
        row = (
            self._base_query(start_date, end_date)
            .with_entities(income, expense, func.count(Transaction.id).label("transaction_count"))
            .one()
        )
        return {
            "income_cents": int(row.income_cents or 0),
            "expense_cents": int(row.expense_cents or 0),
            "transaction_count": int(row.transaction_count or 0),
        }

    def category_breakdown(
        self,
        income_cents: int,
        expense_cents: int,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[dict]:
        """
        One entry per category with at least one transaction, largest first.

        Each percentage is relative to the total of the entry's own type, so
        income entries add up to ~100 and expense entries add up to ~100.
        """
        total_col = func.sum(Transaction.amount_cents).label("total_cents")
        rows = (
            self._base_query(start_date, end_date)
            .join(Category, Transaction.category_id == Category.id)
            .with_entities(
                Category.id.label("category_id"),
                Category.name.label("category_name"),
                Category.icon.label("category_icon"),
                Transaction.type.label("category_type"),
                total_col,
                func.count(Transaction.id).label("count"),
            )
            .group_by(Category.id, Category.name, Category.icon, Transaction.type)
            .order_by(total_col.desc(), Category.name)
            .all()
        )

        type_totals = {
            TransactionType.INCOME: income_cents,
            TransactionType.EXPENSE: expense_cents,
        }

        return [
            {
                "category_id": row.category_id,
                "category_name": row.category_name,
                "category_icon": row.category_icon,
                "category_type": row.category_type,
                "total_amount": int(row.total_cents or 0) / 100.0,
                "count": int(row.count or 0),
                "percentage": percentage_of(int(row.total_cents or 0), type_totals[row.category_type]),
            }
            for row in rows
        ]

    def recent_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int = RECENT_LIMIT,
    ) -> list[Transaction]:
        return (
            self._base_query(start_date, end_date)
            .options(joinedload(Transaction.category))
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(limit)
            .all()
        )

    def snapshot(self, start_date: date | None = None, end_date: date | None = None) -> dict:
        """Build the full dashboard for the user, optionally limited to a period."""
        totals = self.totals(start_date, end_date)
        income_cents = totals["income_cents"]
        expense_cents = totals["expense_cents"]

        return {
            "total_income": income_cents / 100.0,
            "total_expense": expense_cents / 100.0,
            "balance": (income_cents - expense_cents) / 100.0,
            "transaction_count": totals["transaction_count"],
            "category_breakdown": self.category_breakdown(
                income_cents, expense_cents, start_date, end_date
            ),
            "recent_transactions": self.recent_transactions(start_date, end_date),
        }
