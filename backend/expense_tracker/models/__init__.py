from .base import Base
from .user import User
from .transaction import Transaction, TransactionType
from .category import Category

__all__ = [
    "Base",
    "User",
    "Transaction",
    "TransactionType",
    "Category",
]
