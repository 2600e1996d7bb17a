# backend/services/identity.py
import logging
import uuid
from datetime import datetime, timezone

from models.users import User
from utils import errors
from utils.hashing import get_password_hash, verify_password

logger = logging.getLogger(__name__)

ROLES = {"admin", "user"}


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def register(store, *, username: str, email: str, password: str, department: str, role: str = "user") -> User:
    """Create an account with a bcrypt-hashed password.

    Raises Conflict when the email is already registered (case-insensitive).
    """
    email = normalize_email(email)
    if not email or not password:
        raise errors.ValidationError("Email and password are required")
    if len(password.encode("utf-8")) > 72:
        raise errors.ValidationError("Password must be at most 72 bytes")
    if not (username or "").strip():
        raise errors.ValidationError("Username is required")
    if role not in ROLES:
        raise errors.ValidationError(f"Unknown role: {role}")

    if store.get_user_by_email(email):
        raise errors.Conflict("User with this email already exists")

    user = User(
        id=str(uuid.uuid4()),
        username=username.strip(),
        email=email,
        password_hash=get_password_hash(password),
        department=(department or "").strip(),
        role=role,
        created_at=datetime.now(timezone.utc),
    )
    store.add_user(user)
    logger.info("Registered user %s (%s)", user.id, user.role)
    return user


def authenticate(store, email: str, password: str) -> User:
    user = store.get_user_by_email(normalize_email(email))
    if not user or not verify_password(password or "", user.password_hash):
        raise errors.Unauthorized("Invalid email or password")
    return user


def get_user(store, user_id: str) -> User:
    user = store.get_user(user_id)
    if not user:
        raise errors.NotFound("User not found")
    return user
