from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User, TransactionType
from ..schemas import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionPage,
    Pagination,
)
from ..services import TransactionService, TransactionFilter, count_pages
from ..services.exceptions import ServiceError
from ..services.transaction_service import DEFAULT_LIMIT, MAX_LIMIT
from .deps import get_current_user, http_error

router = APIRouter()


@router.get("", response_model=TransactionPage)
def list_transactions(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    type: TransactionType | None = Query(None),
    category_id: int | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Get the user's transactions, most recent first, one page at a time.

    type, category_id and the inclusive start_date/end_date range narrow the
    listing; a page past the end returns no rows.
    """
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")

    filters = TransactionFilter(
        type=type,
        category_id=category_id,
        start_date=start_date,
        end_date=end_date,
        page=page,
        limit=limit,
    )
    rows, total = TransactionService(db, user.id).list_transactions(filters)

    return TransactionPage(
        data=[TransactionResponse.model_validate(tx) for tx in rows],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=count_pages(total, limit),
        ),
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Get a single transaction by ID."""
    transaction = TransactionService(db, user.id).get_transaction(transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create a new transaction."""
    try:
        return TransactionService(db, user.id).create_transaction(
            amount=transaction.amount,
            description=transaction.description,
            tx_date=transaction.date,
            tx_type=transaction.type,
            category_id=transaction.category_id,
        )
    except ServiceError as e:
        raise http_error(e)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    transaction: TransactionUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Replace a transaction's fields."""
    try:
        return TransactionService(db, user.id).update_transaction(
            transaction_id,
            amount=transaction.amount,
            description=transaction.description,
            tx_date=transaction.date,
            tx_type=transaction.type,
            category_id=transaction.category_id,
        )
    except ServiceError as e:
        raise http_error(e)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Delete a transaction."""
    try:
        TransactionService(db, user.id).delete_transaction(transaction_id)
    except ServiceError as e:
        raise http_error(e)
    return None
