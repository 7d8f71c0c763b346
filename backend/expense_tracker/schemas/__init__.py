from .category import CategoryCreate, CategoryUpdate, CategoryResponse, CategorySummary
from .transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    Pagination,
    TransactionPage,
)
from .dashboard import CategoryBreakdownItem, DashboardSnapshot
from .auth import RegisterRequest, LoginRequest, UserResponse, AuthResponse

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategorySummary",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "Pagination",
    "TransactionPage",
    "CategoryBreakdownItem",
    "DashboardSnapshot",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
]
