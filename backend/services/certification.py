# backend/services/certification.py
import logging
import uuid
from datetime import datetime, timezone

from models.certificate import Certificate
from utils import errors

logger = logging.getLogger(__name__)


def certificate_url(user_assessment_id: str) -> str:
    return f"/certificates/{user_assessment_id}.pdf"


def issue(store, user_id: str, course_id: str, user_assessment_id: str) -> Certificate:
    """Issue the certificate for a passing attempt.

    Deduplicated by the attempt id: issuing twice for the same attempt
    returns the certificate created the first time.
    """
    attempt = store.get_user_assessment(user_assessment_id)
    if not attempt:
        raise errors.NotFound("Assessment attempt not found")
    if attempt.user_id != user_id or attempt.course_id != course_id:
        raise errors.ValidationError("Assessment attempt belongs to a different user or course")
    if not attempt.passed:
        raise errors.ValidationError("Certificates are only issued for passing attempts")

    with store.locked("certificate", user_id, course_id):
        existing = store.get_certificate_for_attempt(user_assessment_id)
        if existing:
            logger.info("Certificate for attempt %s already issued, reusing %s", user_assessment_id, existing.id)
            return existing

        certificate = Certificate(
            id=str(uuid.uuid4()),
            user_id=user_id,
            course_id=course_id,
            user_assessment_id=user_assessment_id,
            certificate_url=certificate_url(user_assessment_id),
            issued_at=datetime.now(timezone.utc),
        )
        store.add_certificate(certificate)

    logger.info("Issued certificate %s user=%s course=%s", certificate.id, user_id, course_id)
    return certificate


def list_for_user(store, user_id: str):
    return store.list_certificates(user_id)
