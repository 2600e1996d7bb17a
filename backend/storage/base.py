# backend/storage/base.py
"""Storage contract the services are written against.

Implementations keep the uniqueness rules of the data model:
one user per email, one progress record per (user, course), one attempt
per (user, course, attempt_number) and one certificate per passing
attempt. Violations surface as ``utils.errors.Conflict``.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from models.assessment import Assessment, UserAssessment
from models.certificate import Certificate
from models.course import Course
from models.log import Log
from models.notice import Notice
from models.progress import UserProgress
from models.users import User
from utils.locks import key_locks


class Store(ABC):

    def locked(self, *key):
        """Serialize read-modify-write sequences touching the same key."""
        return key_locks.hold(*key)

    # Users
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def add_user(self, user: User) -> User: ...

    # Courses
    @abstractmethod
    def list_courses(self) -> List[Course]: ...

    @abstractmethod
    def get_course(self, course_id: str) -> Optional[Course]: ...

    @abstractmethod
    def add_course(self, course: Course) -> Course: ...

    # Progress
    @abstractmethod
    def get_progress(self, user_id: str, course_id: str) -> Optional[UserProgress]: ...

    @abstractmethod
    def list_progress(self, user_id: str) -> List[UserProgress]: ...

    @abstractmethod
    def save_progress(self, progress: UserProgress) -> UserProgress: ...

    # Assessment questions
    @abstractmethod
    def list_assessments(self, course_id: str) -> List[Assessment]: ...

    @abstractmethod
    def add_assessment(self, assessment: Assessment) -> Assessment: ...

    # Scored attempts
    @abstractmethod
    def get_user_assessment(self, user_assessment_id: str) -> Optional[UserAssessment]: ...

    @abstractmethod
    def list_user_assessments(self, user_id: str, course_id: str) -> List[UserAssessment]: ...

    @abstractmethod
    def add_user_assessment(self, attempt: UserAssessment) -> UserAssessment: ...

    # Certificates
    @abstractmethod
    def get_certificate_for_attempt(self, user_assessment_id: str) -> Optional[Certificate]: ...

    @abstractmethod
    def list_certificates(self, user_id: str) -> List[Certificate]: ...

    @abstractmethod
    def add_certificate(self, certificate: Certificate) -> Certificate: ...

    # Notices
    @abstractmethod
    def last_notice_seq(self) -> int: ...

    @abstractmethod
    def list_notices(self) -> List[Notice]: ...

    @abstractmethod
    def get_notice(self, notice_id: str) -> Optional[Notice]: ...

    @abstractmethod
    def add_notice(self, notice: Notice) -> Notice: ...

    @abstractmethod
    def save_notice(self, notice: Notice) -> Notice: ...

    @abstractmethod
    def delete_notice(self, notice: Notice) -> None: ...

    # Audit log
    @abstractmethod
    def add_log(self, entry: Log) -> Log: ...

    @abstractmethod
    def list_logs(
        self,
        *,
        action: Optional[str] = None,
        user_id: Optional[str] = None,
        resource: Optional[str] = None,
        status: Optional[str] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Log], int]: ...
