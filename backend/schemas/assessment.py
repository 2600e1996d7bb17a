from pydantic import Field, StrictInt
from datetime import datetime
from typing import List, Literal

from schemas.base import CamelModel

class AssessmentCreate(CamelModel):
    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    correct_answer: StrictInt = Field(ge=0)
    difficulty: Literal["easy", "medium", "hard"] = "medium"

class AssessmentResponse(CamelModel):
    id: str
    course_id: str
    question: str
    options: List[str]
    correct_answer: int
    difficulty: str

# One answer index per question, in question order
class SubmissionCreate(CamelModel):
    answers: List[StrictInt]

class UserAssessmentResponse(CamelModel):
    id: str
    user_id: str
    course_id: str
    score: int
    total_questions: int
    passed: bool
    attempt_number: int
    completed_at: datetime
