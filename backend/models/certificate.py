# backend/models/certificate.py
from sqlalchemy import Column, String, DateTime, ForeignKey
from database import Base

# Proof of completion, at most one per passing attempt
class Certificate(Base):
    __tablename__ = "certificates"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(String(36), ForeignKey("courses.id"), nullable=False)
    user_assessment_id = Column(String(36), ForeignKey("user_assessments.id"), unique=True, nullable=False)
    certificate_url = Column(String, nullable=False)
    issued_at = Column(DateTime(timezone=True), nullable=False)
