# backend/services/assessments.py
"""Quiz questions and scoring of submitted answers."""
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from config import settings
from models.assessment import Assessment, UserAssessment, DIFFICULTIES
from services import certification
from services.catalog import get_course
from utils import errors

logger = logging.getLogger(__name__)


def pass_threshold() -> float:
    return settings.PASS_THRESHOLD


def list_for_course(store, course_id: str) -> List[Assessment]:
    get_course(store, course_id)
    return store.list_assessments(course_id)


def create_question(store, course_id: str, *, question: str, options: List[str], correct_answer: int,
                    difficulty: str = "medium", assessment_id: Optional[str] = None) -> Assessment:
    get_course(store, course_id)
    if not (question or "").strip():
        raise errors.ValidationError("Question text is required")
    if not isinstance(options, list) or len(options) < 2:
        raise errors.ValidationError("A question needs at least two options")
    if any(not isinstance(o, str) or not o.strip() for o in options):
        raise errors.ValidationError("Options must be non-empty strings")
    if not isinstance(correct_answer, int) or isinstance(correct_answer, bool) \
            or not 0 <= correct_answer < len(options):
        raise errors.ValidationError(f"correct_answer must be an index between 0 and {len(options) - 1}")
    if difficulty not in DIFFICULTIES:
        raise errors.ValidationError(f"difficulty must be one of {', '.join(DIFFICULTIES)}")

    assessment = Assessment(
        id=assessment_id or str(uuid.uuid4()),
        course_id=course_id,
        question=question.strip(),
        options=list(options),
        correct_answer=correct_answer,
        difficulty=difficulty,
        position=len(store.list_assessments(course_id)) + 1,
    )
    return store.add_assessment(assessment)


def score_answers(questions: List[Assessment], answers: List[int]) -> int:
    if not questions:
        raise errors.ValidationError("This course has no assessment questions")
    if len(answers) != len(questions):
        raise errors.ValidationError(
            f"Expected {len(questions)} answers, got {len(answers)}"
        )

    score = 0
    for number, (question, answer) in enumerate(zip(questions, answers), start=1):
        if not isinstance(answer, int) or isinstance(answer, bool) or not 0 <= answer < len(question.options):
            raise errors.ValidationError(
                f"Answer {number} must be an option index between 0 and {len(question.options) - 1}"
            )
        if answer == question.correct_answer:
            score += 1
    return score


def submit(store, user_id: str, course_id: str, answers: List[int],
           threshold: Optional[float] = None) -> UserAssessment:
    """Score one attempt and issue a certificate when it passes.

    attempt_number is counted from the stored attempts, never taken from
    the client.
    """
    if threshold is None:
        threshold = pass_threshold()

    questions = list_for_course(store, course_id)
    score = score_answers(questions, answers)
    total = len(questions)
    passed = score / total >= threshold

    with store.locked("attempts", user_id, course_id):
        attempt_number = len(store.list_user_assessments(user_id, course_id)) + 1
        attempt = UserAssessment(
            id=str(uuid.uuid4()),
            user_id=user_id,
            course_id=course_id,
            score=score,
            total_questions=total,
            passed=passed,
            attempt_number=attempt_number,
            completed_at=datetime.now(timezone.utc),
        )
        store.add_user_assessment(attempt)

    logger.info("Assessment attempt %s user=%s course=%s score=%s/%s passed=%s",
                attempt_number, user_id, course_id, score, total, passed)

    if passed:
        certification.issue(store, user_id, course_id, attempt.id)
    return attempt


def list_attempts(store, user_id: str, course_id: str) -> List[UserAssessment]:
    return store.list_user_assessments(user_id, course_id)
