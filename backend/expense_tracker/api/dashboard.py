from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User
from ..schemas import DashboardSnapshot, CategoryBreakdownItem, TransactionResponse
from ..services import DashboardService
from .deps import get_current_user

router = APIRouter()


@router.get("", response_model=DashboardSnapshot)
def get_dashboard(
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Totals, balance, per-category breakdown and latest transactions."""
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")

    snapshot = DashboardService(db, user.id).snapshot(start_date, end_date)
    return DashboardSnapshot(
        total_income=snapshot["total_income"],
        total_expense=snapshot["total_expense"],
        balance=snapshot["balance"],
        transaction_count=snapshot["transaction_count"],
        category_breakdown=[
            CategoryBreakdownItem(**row) for row in snapshot["category_breakdown"]
        ],
        recent_transactions=[
            TransactionResponse.model_validate(tx) for tx in snapshot["recent_transactions"]
        ],
    )
