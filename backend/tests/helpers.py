from datetime import datetime

from sqlalchemy.orm import Session

from expense_tracker.models import Category, TransactionType
from expense_tracker.services import TransactionService


def default_category(session: Session, name: str, category_type: TransactionType) -> Category:
    return (
        session.query(Category)
        .filter(
            Category.name == name,
            Category.type == category_type,
            Category.user_id.is_(None),
        )
        .one()
    )


def add_transaction(
    session: Session,
    user_id: int,
    amount: float,
    tx_type: TransactionType,
    category: Category,
    when: datetime,
    description: str = "Test",
):
    return TransactionService(session, user_id).create_transaction(
        amount=amount,
        description=description,
        tx_date=when,
        tx_type=tx_type,
        category_id=category.id,
    )
