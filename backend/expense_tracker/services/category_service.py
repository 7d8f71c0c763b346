import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..models import Category, Transaction, TransactionType
from .exceptions import CategoryInUse, CategoryNotFound, CategoryReadOnly

logger = logging.getLogger(__name__)


class CategoryService:
    """Category lifecycle scoped to one user: defaults plus the user's own."""

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _visible_query(self):
        return self.db.query(Category).filter(
            or_(Category.user_id.is_(None), Category.user_id == self.user_id)
        )

    def list_categories(self, category_type: TransactionType | None = None) -> list[Category]:
        query = self._visible_query()
        if category_type is not None:
            query = query.filter(Category.type == category_type)
        return query.order_by(Category.type, Category.name, Category.id).all()

    def get_category(self, category_id: int) -> Category | None:
        return self._visible_query().filter(Category.id == category_id).first()

    def _get_owned(self, category_id: int) -> Category:
        category = self.get_category(category_id)
        if category is None:
            raise CategoryNotFound()
        if category.user_id != self.user_id:
            raise CategoryReadOnly()
        return category

    def usage_count(self, category_id: int) -> int:
        """Number of transactions referencing a category."""
        return (
            self.db.query(Transaction)
            .filter(Transaction.category_id == category_id)
            .count()
        )

    def create_category(
        self,
        name: str,
        category_type: TransactionType,
        icon: str,
        color: str | None = None,
    ) -> Category:
        category = Category(
            name=name,
            type=category_type,
            icon=icon,
            color=color,
            user_id=self.user_id,
        )
        self.db.add(category)
        self.db.flush()
        self.db.refresh(category)
        return category

    def update_category(
        self,
        category_id: int,
        name: str,
        category_type: TransactionType,
        icon: str,
        color: str | None = None,
    ) -> Category:
        category = self._get_owned(category_id)

        # Changing the type would orphan the type of existing transactions
        if category_type != category.type and self.usage_count(category_id) > 0:
            raise CategoryInUse("Cannot change the type of a category with existing transactions")

        category.name = name
        category.type = category_type
        category.icon = icon
        category.color = color

        self.db.flush()
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int) -> None:
        category = self._get_owned(category_id)

        in_use = self.usage_count(category_id)
        if in_use > 0:
            logger.info(
                "Refused to delete category %s: referenced by %d transactions",
                category_id, in_use,
            )
            raise CategoryInUse()

        self.db.delete(category)
        self.db.flush()
