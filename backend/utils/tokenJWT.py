# utils/tokenJWT.py
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from models.users import User
from storage.provider import get_store
from utils import errors

# Missing credentials are reported by get_current_user, not by the scheme
bearer_scheme = HTTPBearer(auto_error=False)

# Generate a new JWT access token
def create_access_token(data: dict, expires_delta: timedelta = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def token_for(user: User) -> str:
    return create_access_token(data={"sub": user.id, "username": user.username, "role": user.role})

def _user_from_token(token: str, store) -> User:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        user_id: str = payload.get("sub")
        # Ensure the subject is present in the token payload
        if user_id is None:
            raise errors.Unauthorized("Could not validate credentials")
    except JWTError:
        raise errors.Unauthorized("Could not validate credentials")

    user = store.get_user(user_id)
    if user is None:
        raise errors.Unauthorized("Could not validate credentials")
    return user

# Retrieve the currently authenticated user based on the JWT token
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    store=Depends(get_store),
):
    if credentials is None:
        raise errors.Unauthorized("Not authenticated")
    return _user_from_token(credentials.credentials, store)

# Same as get_current_user, but anonymous requests get None
def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    store=Depends(get_store),
):
    if credentials is None:
        return None
    return _user_from_token(credentials.credentials, store)

def is_admin(user: Optional[User]) -> bool:
    return user is not None and (user.role or "").lower() == "admin"

# Dependency factory for Role-Based Access Control
def role_required(*allowed_roles):
    def _checker(current_user: User = Depends(get_current_user)):
        if allowed_roles and current_user.role not in allowed_roles:
            raise errors.Forbidden("Forbidden: insufficient role")
        return current_user
    return _checker

# Users may act on their own records; admins on anyone's
def ensure_self_or_admin(current_user: User, user_id: str) -> None:
    if current_user.id != user_id and not is_admin(current_user):
        raise errors.Forbidden("You can only access your own records")
