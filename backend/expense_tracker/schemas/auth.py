from pydantic import BaseModel, Field

from .common import NonEmptyStr

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    """Request body for creating an account."""
    name: NonEmptyStr = Field(max_length=255)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=6)


class LoginRequest(BaseModel):
    """Request body for logging in."""
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Issued after a successful register or login."""
    message: str
    token: str
    user: UserResponse
