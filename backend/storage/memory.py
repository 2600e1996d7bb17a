# backend/storage/memory.py
import itertools
import threading
from typing import Dict, List, Optional, Tuple

from models.assessment import Assessment, UserAssessment
from models.certificate import Certificate
from models.course import Course
from models.log import Log
from models.notice import Notice
from models.progress import UserProgress
from models.users import User
from storage.base import Store
from utils import errors


class MemoryStore(Store):
    """Process-local store; records live in dicts keyed by id.

    Composite and unique keys have their own index dicts so lookups never
    scan, and every insert checks them under one mutex.
    """

    def __init__(self):
        self._mutex = threading.RLock()
        self._log_ids = itertools.count(1)

        self.users: Dict[str, User] = {}
        self.courses: Dict[str, Course] = {}
        self.progress: Dict[str, UserProgress] = {}
        self.assessments: Dict[str, Assessment] = {}
        self.user_assessments: Dict[str, UserAssessment] = {}
        self.certificates: Dict[str, Certificate] = {}
        self.notices: Dict[str, Notice] = {}
        self.logs: List[Log] = []

        # Indexes
        self._user_by_email: Dict[str, str] = {}
        self._progress_by_key: Dict[Tuple[str, str], str] = {}
        self._attempt_by_key: Dict[Tuple[str, str, int], str] = {}
        self._certificate_by_attempt: Dict[str, str] = {}

    # Users
    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_email(self, email):
        user_id = self._user_by_email.get(email.lower())
        return self.users.get(user_id) if user_id else None

    def add_user(self, user):
        with self._mutex:
            email = user.email.lower()
            if email in self._user_by_email:
                raise errors.Conflict("User with this email already exists")
            self.users[user.id] = user
            self._user_by_email[email] = user.id
        return user

    # Courses
    def list_courses(self):
        return list(self.courses.values())

    def get_course(self, course_id):
        return self.courses.get(course_id)

    def add_course(self, course):
        with self._mutex:
            if course.id in self.courses:
                raise errors.Conflict(f"Course {course.id} already exists")
            self.courses[course.id] = course
        return course

    # Progress
    def get_progress(self, user_id, course_id):
        progress_id = self._progress_by_key.get((user_id, course_id))
        return self.progress.get(progress_id) if progress_id else None

    def list_progress(self, user_id):
        return [p for p in self.progress.values() if p.user_id == user_id]

    def save_progress(self, progress):
        with self._mutex:
            key = (progress.user_id, progress.course_id)
            existing_id = self._progress_by_key.get(key)
            if existing_id is not None and existing_id != progress.id:
                raise errors.Conflict("Progress already recorded for this user and course")
            self.progress[progress.id] = progress
            self._progress_by_key[key] = progress.id
        return progress

    # Assessment questions
    def list_assessments(self, course_id):
        questions = [a for a in self.assessments.values() if a.course_id == course_id]
        return sorted(questions, key=lambda a: a.position)

    def add_assessment(self, assessment):
        with self._mutex:
            self.assessments[assessment.id] = assessment
        return assessment

    # Scored attempts
    def get_user_assessment(self, user_assessment_id):
        return self.user_assessments.get(user_assessment_id)

    def list_user_assessments(self, user_id, course_id):
        attempts = [
            a for a in self.user_assessments.values()
            if a.user_id == user_id and a.course_id == course_id
        ]
        return sorted(attempts, key=lambda a: a.attempt_number)

    def add_user_assessment(self, attempt):
        with self._mutex:
            key = (attempt.user_id, attempt.course_id, attempt.attempt_number)
            if key in self._attempt_by_key:
                raise errors.Conflict("Attempt number already used")
            self.user_assessments[attempt.id] = attempt
            self._attempt_by_key[key] = attempt.id
        return attempt

    # Certificates
    def get_certificate_for_attempt(self, user_assessment_id):
        certificate_id = self._certificate_by_attempt.get(user_assessment_id)
        return self.certificates.get(certificate_id) if certificate_id else None

    def list_certificates(self, user_id):
        return [c for c in self.certificates.values() if c.user_id == user_id]

    def add_certificate(self, certificate):
        with self._mutex:
            if certificate.user_assessment_id in self._certificate_by_attempt:
                raise errors.Conflict("Certificate already issued for this attempt")
            self.certificates[certificate.id] = certificate
            self._certificate_by_attempt[certificate.user_assessment_id] = certificate.id
        return certificate

    # Notices
    def last_notice_seq(self):
        return max((n.seq for n in self.notices.values()), default=0)

    def list_notices(self):
        return sorted(self.notices.values(), key=lambda n: (n.created_at, n.seq), reverse=True)

    def get_notice(self, notice_id):
        return self.notices.get(notice_id)

    def add_notice(self, notice):
        with self._mutex:
            self.notices[notice.id] = notice
        return notice

    def save_notice(self, notice):
        with self._mutex:
            self.notices[notice.id] = notice
        return notice

    def delete_notice(self, notice):
        with self._mutex:
            self.notices.pop(notice.id, None)

    # Audit log
    def add_log(self, entry):
        with self._mutex:
            entry.id = next(self._log_ids)
            self.logs.append(entry)
        return entry

    def list_logs(self, *, action=None, user_id=None, resource=None, status=None, offset=0, limit=20):
        items = self.logs[::-1]
        if action:
            items = [e for e in items if action.lower() in (e.action or "").lower()]
        if user_id is not None:
            items = [e for e in items if e.user_id == user_id]
        if resource:
            items = [e for e in items if resource.lower() in (e.resource or "").lower()]
        if status:
            items = [e for e in items if e.status == status]
        return items[offset:offset + limit], len(items)
