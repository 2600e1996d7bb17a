# backend/services/catalog.py
import uuid

from models.course import Course, COURSE_TYPES
from utils import errors


def list_active(store):
    # Insertion order, no sort
    return [c for c in store.list_courses() if c.is_active]


def get_course(store, course_id: str) -> Course:
    course = store.get_course(course_id)
    if not course:
        raise errors.NotFound("Course not found")
    return course


def create_course(store, *, title, description, type, duration, video_url=None, document_url=None,
                  color="blue", is_active=True, course_id=None) -> Course:
    if not (title or "").strip():
        raise errors.ValidationError("Course title is required")
    if type not in COURSE_TYPES:
        raise errors.ValidationError(f"Course type must be one of {', '.join(COURSE_TYPES)}")
    if not isinstance(duration, int) or isinstance(duration, bool) or duration <= 0:
        raise errors.ValidationError("Course duration must be a positive number of minutes")

    course = Course(
        id=course_id or str(uuid.uuid4()),
        title=title.strip(),
        description=description or "",
        type=type,
        duration=duration,
        video_url=video_url,
        document_url=document_url,
        color=color or "blue",
        is_active=is_active,
    )
    return store.add_course(course)
