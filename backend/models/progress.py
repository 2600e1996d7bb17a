# backend/models/progress.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from database import Base

# Tracks a single user's advancement through a single course
class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id"), nullable=False)

    progress = Column(Integer, CheckConstraint("progress >= 0 AND progress <= 100"), nullable=False, default=0)
    current_step = Column(Integer, CheckConstraint("current_step >= 1 AND current_step <= 3"), nullable=False, default=1)
    time_spent = Column(Integer, CheckConstraint("time_spent >= 0"), nullable=False, default=0)  # seconds
    completed = Column(Boolean, nullable=False, default=False)
    last_accessed = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_progress_user_course"),
    )
