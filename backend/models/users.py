# backend/models/users.py
from sqlalchemy import Column, String, DateTime, CheckConstraint
from database import Base

# Represents a portal account with authentication details and system role
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    department = Column(String, nullable=False)
    role = Column(String, CheckConstraint("role IN ('admin', 'user')"), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), nullable=False)
