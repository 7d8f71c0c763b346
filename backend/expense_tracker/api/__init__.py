from fastapi import APIRouter

from .auth import router as auth_router, profile_router
from .transactions import router as transactions_router
from .categories import router as categories_router
from .dashboard import router as dashboard_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(profile_router, prefix="/user", tags=["auth"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
