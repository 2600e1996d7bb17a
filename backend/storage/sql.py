# backend/storage/sql.py
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.assessment import Assessment, UserAssessment
from models.certificate import Certificate
from models.course import Course
from models.log import Log
from models.notice import Notice
from models.progress import UserProgress
from models.users import User
from storage.base import Store
from utils import errors

logger = logging.getLogger(__name__)


class SqlStore(Store):
    """Store backed by a SQLAlchemy session; every write commits immediately."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, obj, conflict_message: str):
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Integrity violation on %s: %s", type(obj).__name__, exc.orig)
            raise errors.Conflict(conflict_message) from exc
        self.db.refresh(obj)
        return obj

    # Users
    def get_user(self, user_id):
        return self.db.get(User, user_id)

    def get_user_by_email(self, email):
        return self.db.query(User).filter(User.email == email.lower()).first()

    def add_user(self, user):
        return self._commit(user, "User with this email already exists")

    # Courses
    def list_courses(self):
        # No ORDER BY: rows come back in insertion order
        return self.db.query(Course).all()

    def get_course(self, course_id):
        return self.db.get(Course, course_id)

    def add_course(self, course):
        return self._commit(course, f"Course {course.id} already exists")

    # Progress
    def get_progress(self, user_id, course_id):
        return (
            self.db.query(UserProgress)
            .filter(UserProgress.user_id == user_id, UserProgress.course_id == course_id)
            .first()
        )

    def list_progress(self, user_id):
        return self.db.query(UserProgress).filter(UserProgress.user_id == user_id).all()

    def save_progress(self, progress):
        return self._commit(progress, "Progress already recorded for this user and course")

    # Assessment questions
    def list_assessments(self, course_id):
        return (
            self.db.query(Assessment)
            .filter(Assessment.course_id == course_id)
            .order_by(Assessment.position.asc())
            .all()
        )

    def add_assessment(self, assessment):
        return self._commit(assessment, "Assessment could not be stored")

    # Scored attempts
    def get_user_assessment(self, user_assessment_id):
        return self.db.get(UserAssessment, user_assessment_id)

    def list_user_assessments(self, user_id, course_id):
        return (
            self.db.query(UserAssessment)
            .filter(UserAssessment.user_id == user_id, UserAssessment.course_id == course_id)
            .order_by(UserAssessment.attempt_number.asc())
            .all()
        )

    def add_user_assessment(self, attempt):
        return self._commit(attempt, "Attempt number already used")

    # Certificates
    def get_certificate_for_attempt(self, user_assessment_id):
        return (
            self.db.query(Certificate)
            .filter(Certificate.user_assessment_id == user_assessment_id)
            .first()
        )

    def list_certificates(self, user_id):
        return (
            self.db.query(Certificate)
            .filter(Certificate.user_id == user_id)
            .order_by(Certificate.issued_at.asc())
            .all()
        )

    def add_certificate(self, certificate):
        return self._commit(certificate, "Certificate already issued for this attempt")

    # Notices
    def last_notice_seq(self):
        return self.db.query(func.max(Notice.seq)).scalar() or 0

    def list_notices(self):
        return self.db.query(Notice).order_by(Notice.created_at.desc(), Notice.seq.desc()).all()

    def get_notice(self, notice_id):
        return self.db.get(Notice, notice_id)

    def add_notice(self, notice):
        return self._commit(notice, "Notice could not be stored")

    def save_notice(self, notice):
        return self._commit(notice, "Notice could not be stored")

    def delete_notice(self, notice):
        self.db.delete(notice)
        self.db.commit()

    # Audit log
    def add_log(self, entry):
        return self._commit(entry, "Log entry could not be stored")

    def list_logs(self, *, action=None, user_id=None, resource=None, status=None, offset=0, limit=20):
        query = self.db.query(Log)
        if action:
            query = query.filter(Log.action.ilike(f"%{action}%"))
        if user_id is not None:
            query = query.filter(Log.user_id == user_id)
        if resource:
            query = query.filter(Log.resource.ilike(f"%{resource}%"))
        if status:
            query = query.filter(Log.status == status)

        total = query.count()
        items = query.order_by(Log.ts.desc(), Log.id.desc()).offset(offset).limit(limit).all()
        return items, total
