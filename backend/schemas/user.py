from pydantic import EmailStr, Field
from datetime import datetime
from typing import Optional

from schemas.base import CamelModel

# Schema for user authentication credentials
class UserLogin(CamelModel):
    email: str
    password: str

# Schema for user registration requests
class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6)
    department: str = Field(min_length=1)

# Output schema for user profile details, never includes the password hash
class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    department: str
    role: str
    created_at: Optional[datetime] = None

# Login result: the user plus a bearer token for later requests
class LoginResponse(UserResponse):
    access_token: str
    token_type: str = "bearer"

# Identity carried by the session token
class Principal(CamelModel):
    id: str
    username: str
    role: str
