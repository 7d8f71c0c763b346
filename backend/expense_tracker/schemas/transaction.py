from datetime import date, datetime, time, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.transaction import TransactionType
from .category import CategorySummary
from .common import NonEmptyStr

# Largest accepted amount; keeps the stored cents within a 64-bit integer
MAX_AMOUNT = 1_000_000_000_000


class TransactionBase(BaseModel):
    """Base transaction fields."""
    amount: float = Field(gt=0, le=MAX_AMOUNT)
    description: NonEmptyStr = Field(max_length=1000)
    date: datetime
    type: TransactionType
    category_id: int


class TransactionCreate(TransactionBase):
    """Fields for creating or replacing a transaction."""

    @field_validator("amount")
    @classmethod
    def _at_least_one_cent(cls, value: float) -> float:
        if round(value * 100) < 1:
            raise ValueError("Amount must be at least 0.01")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        """Accept date-only input and store it as midnight of that day."""
        if isinstance(value, str) and len(value.strip()) == 10:
            value = date.fromisoformat(value.strip())
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        return value

    @field_validator("date")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class TransactionUpdate(TransactionCreate):
    """Updates replace every field (PUT semantics)."""
    pass


class TransactionResponse(TransactionBase):
    """Transaction response with the resolved category."""
    id: int
    category: CategorySummary
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class Pagination(BaseModel):
    """Paging metadata for list responses."""
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")


class TransactionPage(BaseModel):
    """One page of transactions plus paging metadata."""
    data: list[TransactionResponse]
    pagination: Pagination
