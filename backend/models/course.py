# backend/models/course.py
from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint
from database import Base

COURSE_TYPES = ("workplace-safety", "hazard-prevention", "tbm")

# Training course shown in the catalog; inactive courses are hidden from listings
class Course(Base):
    __tablename__ = "courses"

    id = Column(String(36), primary_key=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    type = Column(String, nullable=False)
    duration = Column(Integer, CheckConstraint("duration > 0"), nullable=False)  # minutes

    # Lesson media
    video_url = Column(String, nullable=True)
    document_url = Column(String, nullable=True)

    color = Column(String, nullable=False, default="blue")
    is_active = Column(Boolean, nullable=False, default=True)
