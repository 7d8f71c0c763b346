from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_db
from ..models import User
from ..services import AuthService, decode_access_token
from ..services.exceptions import (
    ServiceError,
    NotFound,
    CategoryReadOnly,
    Conflict,
    TypeMismatch,
    InvalidToken,
)

bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the bearer token on the request to a user, or fail with 401."""
    if credentials is None:
        raise HTTPException(
            status_code=401, detail="No authorization header", headers=_UNAUTHORIZED_HEADERS
        )

    try:
        user_id = decode_access_token(credentials.credentials, settings)
    except InvalidToken as e:
        raise HTTPException(status_code=401, detail=str(e), headers=_UNAUTHORIZED_HEADERS)

    user = AuthService(db).get_user(user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found", headers=_UNAUTHORIZED_HEADERS)
    return user


def http_error(error: ServiceError) -> HTTPException:
    """Translate a service-layer error into the matching HTTP error."""
    if isinstance(error, NotFound):
        status_code = 404
    elif isinstance(error, CategoryReadOnly):
        status_code = 403
    elif isinstance(error, Conflict):
        status_code = 409
    elif isinstance(error, TypeMismatch):
        status_code = 400
    elif isinstance(error, InvalidToken):
        status_code = 401
    else:
        status_code = 400
    return HTTPException(status_code=status_code, detail=str(error))
