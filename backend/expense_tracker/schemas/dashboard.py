from pydantic import BaseModel

from ..models.transaction import TransactionType
from .transaction import TransactionResponse


class CategoryBreakdownItem(BaseModel):
    category_id: int
    category_name: str
    category_icon: str
    category_type: TransactionType
    total_amount: float
    count: int
    percentage: float


class DashboardSnapshot(BaseModel):
    total_income: float
    total_expense: float
    balance: float
    transaction_count: int
    category_breakdown: list[CategoryBreakdownItem]
    recent_transactions: list[TransactionResponse]
