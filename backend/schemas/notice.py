from pydantic import Field
from datetime import datetime
from typing import Optional

from schemas.base import CamelModel

class NoticeCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)

# Partial update; omitted fields keep their value
class NoticeUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)

class NoticeResponse(CamelModel):
    id: str
    author_id: str
    title: str
    content: str
    created_at: datetime
    view_count: int
