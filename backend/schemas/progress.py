from pydantic import Field, StrictBool, StrictInt
from datetime import datetime
from typing import Optional

from schemas.base import CamelModel

# Partial progress update; every field is optional and unset fields are left alone
class ProgressUpdate(CamelModel):
    progress: Optional[StrictInt] = Field(None, ge=0, le=100)
    current_step: Optional[StrictInt] = Field(None, ge=1, le=3)
    time_spent: Optional[StrictInt] = Field(None, ge=0)
    completed: Optional[StrictBool] = None

class ProgressResponse(CamelModel):
    id: str
    user_id: str
    course_id: str
    progress: int
    current_step: int
    time_spent: int
    completed: bool
    last_accessed: datetime
