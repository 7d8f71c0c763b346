from sqlalchemy import String, Integer, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin
from .transaction import TransactionType


class Category(Base, TimestampMixin):
    """
    Grouping for transactions, typed as income or expense.

    Categories without a user are system defaults: visible to everyone,
    editable by no one.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    icon: Mapped[str] = mapped_column(String(32), nullable=False)
    color: Mapped[str | None] = mapped_column(String(16), nullable=True)

    # Owner; NULL for default categories
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True
    )

    # Relationships
    user: Mapped["User | None"] = relationship("User", back_populates="categories")
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="category"
    )

    @property
    def is_default(self) -> bool:
        return self.user_id is None

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', type='{self.type.value}')>"
