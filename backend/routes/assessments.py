# backend/routes/assessments.py
from typing import List

from fastapi import APIRouter, Depends, Request, status

from models.users import User
from schemas.assessment import SubmissionCreate, UserAssessmentResponse
from services import assessments
from storage.provider import get_store
from utils import errors
from utils.audit import write_log, client_ip
from utils.tokenJWT import ensure_self_or_admin, get_current_user

router = APIRouter(prefix="/api/users/{user_id}/assessments", tags=["Assessments"])


# Score a quiz attempt; a pass issues the certificate
@router.post("/{course_id}", response_model=UserAssessmentResponse, status_code=status.HTTP_201_CREATED)
def submit_assessment(
    user_id: str,
    course_id: str,
    payload: SubmissionCreate,
    request: Request,
    store=Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    # Attempts are always submitted by the person taking the quiz
    if current_user.id != user_id:
        raise errors.Forbidden("Assessments can only be submitted for yourself")

    attempt = assessments.submit(store, user_id, course_id, payload.answers)
    write_log(
        store,
        user_id=user_id,
        action="ASSESSMENT_SUBMIT",
        resource="assessment",
        ip=client_ip(request),
        meta={"course_id": course_id, "attempt": attempt.attempt_number,
              "score": attempt.score, "passed": attempt.passed},
    )
    return attempt


@router.get("/{course_id}", response_model=List[UserAssessmentResponse])
def list_attempts(user_id: str, course_id: str, store=Depends(get_store),
                  current_user: User = Depends(get_current_user)):
    ensure_self_or_admin(current_user, user_id)
    return assessments.list_attempts(store, user_id, course_id)
