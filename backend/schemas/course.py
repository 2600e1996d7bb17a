from pydantic import Field, StrictInt
from typing import Literal, Optional

from schemas.base import CamelModel

CourseType = Literal["workplace-safety", "hazard-prevention", "tbm"]

class CourseCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    type: CourseType
    duration: StrictInt = Field(gt=0)
    video_url: Optional[str] = None
    document_url: Optional[str] = None
    color: str = "blue"
    is_active: bool = True

class CourseResponse(CamelModel):
    id: str
    title: str
    description: str
    type: str
    duration: int
    video_url: Optional[str] = None
    document_url: Optional[str] = None
    color: str
    is_active: bool
