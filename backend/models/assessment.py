# backend/models/assessment.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON, UniqueConstraint
from database import Base

DIFFICULTIES = ("easy", "medium", "hard")

# Multiple-choice quiz question attached to a course
class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(String(36), primary_key=True)
    course_id = Column(String(36), ForeignKey("courses.id"), nullable=False, index=True)
    question = Column(String, nullable=False)
    options = Column(JSON, nullable=False)  # ordered list of answer texts
    correct_answer = Column(Integer, nullable=False)  # index into options
    difficulty = Column(String, nullable=False, default="medium")
    position = Column(Integer, nullable=False, default=1)  # answers are matched in this order


# One scored quiz attempt; never modified after creation
class UserAssessment(Base):
    __tablename__ = "user_assessments"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id"), nullable=False)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    passed = Column(Boolean, nullable=False)
    attempt_number = Column(Integer, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "course_id", "attempt_number", name="uq_attempt_user_course_number"),
    )
