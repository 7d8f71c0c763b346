import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from ..config import Settings
from ..models import User
from .exceptions import EmailAlreadyRegistered, InvalidToken

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 200_000


def hash_password(password: str, salt: str | None = None) -> tuple[str, str]:
    """Hash a password with PBKDF2-SHA256. Returns (hash, salt), both hex."""
    if salt is None:
        salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt), PBKDF2_ITERATIONS
    )
    return digest.hex(), salt


def verify_password(password: str, password_hash: str, salt: str) -> bool:
    """Check a password against a stored hash and salt."""
    candidate, _ = hash_password(password, salt)
    return hmac.compare_digest(candidate, password_hash)


def create_access_token(user: User, settings: Settings) -> str:
    """Issue a signed bearer token for a user."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + timedelta(hours=settings.token_expire_hours),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    """Validate a bearer token and return the user id it was issued for."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidToken() from e

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise InvalidToken("Token has no valid subject")
    return int(subject)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def register(self, name: str, email: str, password: str) -> User:
        if self.get_user_by_email(email):
            raise EmailAlreadyRegistered()

        password_hash, salt = hash_password(password)
        user = User(
            name=name,
            email=normalize_email(email),
            password_hash=password_hash,
            password_salt=salt,
        )
        self.db.add(user)
        self.db.flush()
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user if the credentials match, otherwise None."""
        user = self.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash, user.password_salt):
            logger.info("Failed login attempt")
            return None
        return user
