import enum
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class TransactionType(enum.Enum):
    """Direction of a transaction (and of the category it belongs to)."""
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(Base, TimestampMixin):
    """
    A single dated income or expense record.

    Amounts are stored as positive integer cents; the direction is carried
    by `type`, not by the sign.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=False, index=True
    )

    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="transactions")
    category: Mapped["Category"] = relationship("Category", back_populates="transactions")

    @property
    def amount(self) -> float:
        """Get amount as decimal currency units."""
        return self.amount_cents / 100.0

    @amount.setter
    def amount(self, value: float) -> None:
        """Set amount from decimal currency units."""
        self.amount_cents = int(round(value * 100))

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, date={self.date:%Y-%m-%d}, "
            f"type='{self.type.value}', amount={self.amount:.2f})>"
        )
