"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.user import User
from src.schemas.auth import UserRegister

settings = get_settings()


class UserAlreadyExistsError(Exception):
    """Username or email collided with an existing user on insert."""


# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": user_id,
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def get_user_by_login(db: Session, identifier: str) -> User | None:
    """Get a user by username or email."""
    identifier = identifier.strip()
    return (
        db.query(User)
        .filter(or_(User.username == identifier, User.email == identifier.lower()))
        .first()
    )


def authenticate_user(db: Session, identifier: str, password: str) -> User | None:
    """Authenticate an active user by username or email and password."""
    user = get_user_by_login(db, identifier)
    if not user or not user.is_active:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def user_exists(db: Session, username: str, email: str) -> bool:
    """Check whether the username or email is already registered."""
    existing = (
        db.query(User.id)
        .filter(or_(User.username == username.strip(), User.email == email.strip().lower()))
        .first()
    )
    return existing is not None


def create_user(db: Session, data: UserRegister) -> User:
    """Create a new user with a hashed password."""
    user = User(
        username=data.username.strip(),
        email=data.email.strip().lower(),
        password_hash=get_password_hash(data.password),
        full_name=data.full_name.strip() if data.full_name else None,
        avatar_url=data.avatar_url or None,
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise UserAlreadyExistsError(data.username) from e
    db.refresh(user)
    return user
