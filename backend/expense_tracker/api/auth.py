from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_db
from ..models import User
from ..schemas import RegisterRequest, LoginRequest, UserResponse, AuthResponse
from ..services import AuthService, create_access_token
from ..services.exceptions import EmailAlreadyRegistered
from .deps import get_current_user, http_error

router = APIRouter()
profile_router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create an account and log it in."""
    try:
        user = AuthService(db).register(data.name, data.email, data.password)
    except EmailAlreadyRegistered as e:
        raise http_error(e)

    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user, settings),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange credentials for a bearer token."""
    user = AuthService(db).authenticate(data.email, data.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user, settings),
        user=UserResponse.model_validate(user),
    )


@profile_router.get("/profile", response_model=UserResponse)
def get_profile(user: User = Depends(get_current_user)):
    """Get the logged-in user's profile."""
    return user
