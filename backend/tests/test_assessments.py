from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from models.assessment import UserAssessment
from services import assessments, catalog, certification
from utils import errors


def test_all_correct_answers_pass_with_full_score(store, quiz):
    attempt = assessments.submit(store, "u1", "course-1", [0, 2])

    assert attempt.score == attempt.total_questions == 2
    assert attempt.passed is True
    assert attempt.attempt_number == 1


def test_zero_correct_answers_fail(store, quiz):
    attempt = assessments.submit(store, "u1", "course-1", [1, 0])

    assert attempt.score == 0
    assert attempt.passed is False
    assert certification.list_for_user(store, "u1") == []


def test_threshold_is_a_fraction_of_questions(store, quiz):
    # 1 of 2 correct: fails at 0.7, passes at 0.5
    assert assessments.submit(store, "u1", "course-1", [0, 0]).passed is False
    assert assessments.submit(store, "u1", "course-1", [0, 0], threshold=0.5).passed is True


def test_attempt_number_counts_prior_attempts(store, quiz):
    numbers = [assessments.submit(store, "u1", "course-1", [1, 1]).attempt_number for _ in range(3)]
    other_user = assessments.submit(store, "u2", "course-1", [1, 1])

    assert numbers == [1, 2, 3]
    assert other_user.attempt_number == 1
    assert [a.attempt_number for a in assessments.list_attempts(store, "u1", "course-1")] == [1, 2, 3]


@pytest.mark.parametrize("answers", [[0], [0, 2, 1], [0, 3], [-1, 2], [0, True]])
def test_malformed_answers_are_rejected(store, quiz, answers):
    with pytest.raises(errors.ValidationError):
        assessments.submit(store, "u1", "course-1", answers)
    assert assessments.list_attempts(store, "u1", "course-1") == []


def test_course_without_questions_is_rejected(store, course):
    with pytest.raises(errors.ValidationError):
        assessments.submit(store, "u1", course.id, [])


def test_unknown_course_is_not_found(store):
    with pytest.raises(errors.NotFound):
        assessments.list_for_course(store, "missing")


def test_questions_include_correct_answers(store, quiz):
    listed = assessments.list_for_course(store, "course-1")

    assert [q.correct_answer for q in listed] == [0, 2]
    assert listed[0].options == ["Wear a harness", "Work faster", "Skip inspection"]


@pytest.mark.parametrize(
    "fields",
    [
        {"options": ["only one"], "correct_answer": 0},
        {"options": ["a", "b"], "correct_answer": 2},
        {"options": ["a", "b"], "correct_answer": -1},
        {"options": ["a", ""], "correct_answer": 0},
    ],
)
def test_create_question_validates_correct_answer_index(store, course, fields):
    with pytest.raises(errors.ValidationError):
        assessments.create_question(store, course.id, question="Q?", **fields)


def test_single_correct_answer_passes_and_issues_certificate(store, course):
    assessments.create_question(store, course.id, question="Q?", options=["yes", "no"], correct_answer=0)

    attempt = assessments.submit(store, "u1", course.id, [0], threshold=0.7)
    certificates = certification.list_for_user(store, "u1")

    assert attempt.passed is True
    assert len(certificates) == 1
    assert certificates[0].user_assessment_id == attempt.id
    assert attempt.id in certificates[0].certificate_url
    assert certificates[0].certificate_url == f"/certificates/{attempt.id}.pdf"


def test_each_passing_submission_gets_exactly_one_certificate(store, quiz):
    first = assessments.submit(store, "u1", "course-1", [0, 2])
    second = assessments.submit(store, "u1", "course-1", [0, 2])

    certificates = certification.list_for_user(store, "u1")
    assert sorted(c.user_assessment_id for c in certificates) == sorted([first.id, second.id])


def test_retried_issuance_does_not_duplicate(store, quiz):
    attempt = assessments.submit(store, "u1", "course-1", [0, 2])
    original = certification.list_for_user(store, "u1")[0]

    again = certification.issue(store, "u1", "course-1", attempt.id)

    assert again.id == original.id
    assert len(certification.list_for_user(store, "u1")) == 1


def test_issue_rejects_failed_or_foreign_attempts(store, quiz):
    failed = assessments.submit(store, "u1", "course-1", [1, 1])
    with pytest.raises(errors.ValidationError):
        certification.issue(store, "u1", "course-1", failed.id)

    passed = assessments.submit(store, "u1", "course-1", [0, 2])
    with pytest.raises(errors.ValidationError):
        certification.issue(store, "u2", "course-1", passed.id)

    with pytest.raises(errors.NotFound):
        certification.issue(store, "u1", "course-1", "no-such-attempt")


def test_concurrent_issuance_creates_one_certificate(store_factory, run_concurrently):
    setup = store_factory()
    catalog.create_course(setup, course_id="c", title="C", description="", type="tbm", duration=1)
    # A passing attempt nobody has issued for yet
    attempt = setup.add_user_assessment(UserAssessment(
        id=str(uuid.uuid4()), user_id="u1", course_id="c", score=1, total_questions=1,
        passed=True, attempt_number=1, completed_at=datetime.now(timezone.utc),
    ))

    issued = []
    failures = run_concurrently(
        lambda i: issued.append(certification.issue(store_factory(), "u1", "c", attempt.id)), 8,
    )

    assert failures == []
    assert len({c.id for c in issued}) == 1
    assert len(certification.list_for_user(store_factory(), "u1")) == 1


def test_concurrent_submissions_number_attempts_uniquely(store_factory, run_concurrently):
    setup = store_factory()
    catalog.create_course(setup, course_id="c", title="C", description="", type="tbm", duration=1)
    assessments.create_question(setup, "c", question="Q?", options=["a", "b"], correct_answer=1)

    failures = run_concurrently(lambda i: assessments.submit(store_factory(), "u1", "c", [1]), 6)

    check = store_factory()
    attempts = assessments.list_attempts(check, "u1", "c")
    assert failures == []
    assert sorted(a.attempt_number for a in attempts) == [1, 2, 3, 4, 5, 6]
    assert len(certification.list_for_user(check, "u1")) == 6
