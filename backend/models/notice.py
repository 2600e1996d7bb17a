# backend/models/notice.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint
from database import Base

class Notice(Base):
    __tablename__ = "notices"

    id = Column(String(36), primary_key=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    view_count = Column(Integer, CheckConstraint("view_count >= 0"), nullable=False, default=0)
    # Creation order, breaks ties between equal created_at values
    seq = Column(Integer, nullable=False, default=0, index=True)
