from datetime import datetime
from pydantic import BaseModel, Field

from ..models.transaction import TransactionType
from .common import NonEmptyStr


class CategoryBase(BaseModel):
    """Base category fields."""
    name: NonEmptyStr = Field(max_length=255)
    type: TransactionType
    icon: NonEmptyStr = Field(max_length=32)
    color: str | None = Field(default=None, max_length=16)


class CategoryCreate(CategoryBase):
    """Fields for creating a category."""
    pass


class CategoryUpdate(CategoryBase):
    """Fields for replacing a category's editable fields."""
    pass


class CategorySummary(BaseModel):
    """Category as embedded in transactions."""
    id: int
    name: str
    icon: str
    type: TransactionType

    class Config:
        from_attributes = True


class CategoryResponse(CategoryBase):
    """Category response with all fields."""
    id: int
    user_id: int | None = None
    is_default: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
