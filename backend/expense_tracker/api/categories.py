from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User, TransactionType
from ..schemas import CategoryCreate, CategoryUpdate, CategoryResponse
from ..services import CategoryService
from ..services.exceptions import ServiceError
from .deps import get_current_user, http_error

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    type: TransactionType | None = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Get default categories plus the user's own, optionally of one type."""
    return CategoryService(db, user.id).list_categories(type)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Get a single category by ID."""
    category = CategoryService(db, user.id).get_category(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create a new category owned by the user."""
    return CategoryService(db, user.id).create_category(
        name=category.name,
        category_type=category.type,
        icon=category.icon,
        color=category.color,
    )


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category: CategoryUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Update one of the user's categories."""
    try:
        return CategoryService(db, user.id).update_category(
            category_id,
            name=category.name,
            category_type=category.type,
            icon=category.icon,
            color=category.color,
        )
    except ServiceError as e:
        raise http_error(e)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Delete one of the user's categories. Fails while transactions use it."""
    try:
        CategoryService(db, user.id).delete_category(category_id)
    except ServiceError as e:
        raise http_error(e)
    return None
