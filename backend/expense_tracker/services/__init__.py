from .auth_service import AuthService, create_access_token, decode_access_token, hash_password, verify_password
from .category_service import CategoryService
from .transaction_service import TransactionService, TransactionFilter, count_pages
from .dashboard_service import DashboardService
from .exceptions import (
    ServiceError,
    NotFound,
    CategoryNotFound,
    TransactionNotFound,
    CategoryReadOnly,
    Conflict,
    CategoryInUse,
    EmailAlreadyRegistered,
    TypeMismatch,
    InvalidToken,
)

__all__ = [
    "AuthService",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
    "CategoryService",
    "TransactionService",
    "TransactionFilter",
    "count_pages",
    "DashboardService",
    "ServiceError",
    "NotFound",
    "CategoryNotFound",
    "TransactionNotFound",
    "CategoryReadOnly",
    "Conflict",
    "CategoryInUse",
    "EmailAlreadyRegistered",
    "TypeMismatch",
    "InvalidToken",
]
