from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from sqlalchemy.orm import Session, joinedload

from ..models import Category, Transaction, TransactionType
from .category_service import CategoryService
from .exceptions import CategoryNotFound, TransactionNotFound, TypeMismatch

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass
class TransactionFilter:
    """Optional listing predicates (combined with AND) plus paging."""
    type: TransactionType | None = None
    category_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


def count_pages(total: int, limit: int) -> int:
    """Number of pages needed to show `total` rows, `limit` per page."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return -(-total // limit)


def day_bounds(start_date: date | None, end_date: date | None) -> tuple[datetime | None, datetime | None]:
    """
    Convert an inclusive date range to [start, end) timestamps.

    The end bound is the midnight after `end_date` so the whole last day matches.
    """
    start = datetime.combine(start_date, time.min) if start_date else None
    end = datetime.combine(end_date + timedelta(days=1), time.min) if end_date else None
    return start, end


class TransactionService:
    """Transaction lifecycle and filtered listing for one user."""

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _base_query(self):
        return (
            self.db.query(Transaction)
            .options(joinedload(Transaction.category))
            .filter(Transaction.user_id == self.user_id)
        )

    def _apply_filter(self, query, filters: TransactionFilter):
        if filters.type is not None:
            query = query.filter(Transaction.type == filters.type)
        if filters.category_id is not None:
            query = query.filter(Transaction.category_id == filters.category_id)

        start, end = day_bounds(filters.start_date, filters.end_date)
        if start is not None:
            query = query.filter(Transaction.date >= start)
        if end is not None:
            query = query.filter(Transaction.date < end)
        return query

    def list_transactions(self, filters: TransactionFilter) -> tuple[list[Transaction], int]:
        """
        Get one page of matching transactions, most recent first.

        Returns (rows, total) where total counts every match, not just this page.
        A page past the end yields no rows.
        """
        query = self._apply_filter(self._base_query(), filters)
        total = query.order_by(None).count()

        offset = (filters.page - 1) * filters.limit
        if offset >= total:
            return [], total

        rows = (
            query.order_by(Transaction.date.desc(), Transaction.id.desc())
            .offset(offset)
            .limit(filters.limit)
            .all()
        )
        return rows, total

    def get_transaction(self, transaction_id: int) -> Transaction | None:
        return self._base_query().filter(Transaction.id == transaction_id).first()

    def _resolve_category(self, category_id: int, tx_type: TransactionType) -> Category:
        category = CategoryService(self.db, self.user_id).get_category(category_id)
        if category is None:
            raise CategoryNotFound()
        if category.type != tx_type:
            raise TypeMismatch()
        return category

    def create_transaction(
        self,
        amount: float,
        description: str,
        tx_date: datetime,
        tx_type: TransactionType,
        category_id: int,
    ) -> Transaction:
        category = self._resolve_category(category_id, tx_type)

        transaction = Transaction(
            user_id=self.user_id,
            category_id=category.id,
            description=description,
            date=tx_date,
            type=tx_type,
        )
        transaction.amount = amount
        self.db.add(transaction)
        self.db.flush()
        self.db.refresh(transaction)
        return transaction

    def update_transaction(
        self,
        transaction_id: int,
        amount: float,
        description: str,
        tx_date: datetime,
        tx_type: TransactionType,
        category_id: int,
    ) -> Transaction:
        transaction = self.get_transaction(transaction_id)
        if transaction is None:
            raise TransactionNotFound()

        category = self._resolve_category(category_id, tx_type)

        transaction.amount = amount
        transaction.description = description
        transaction.date = tx_date
        transaction.type = tx_type
        transaction.category_id = category.id

        self.db.flush()
        self.db.refresh(transaction)
        return transaction

    def delete_transaction(self, transaction_id: int) -> None:
        transaction = self.get_transaction(transaction_id)
        if transaction is None:
            raise TransactionNotFound()
        self.db.delete(transaction)
        self.db.flush()
