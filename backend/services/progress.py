# backend/services/progress.py
"""Per-(user, course) progress records.

Clients write progress whenever their state changes; ``upsert`` creates the
record on first write and merges later patches over it. Applying the same
patch twice leaves the record unchanged apart from ``last_accessed``.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from config import settings
from models.progress import UserProgress
from services.catalog import get_course
from services.identity import get_user
from utils import errors

logger = logging.getLogger(__name__)

DEFAULTS = {"progress": 0, "current_step": 1, "time_spent": 0, "completed": False}

# field -> (min, max); None means unbounded
RANGES = {
    "progress": (0, 100),
    "current_step": (1, 3),
    "time_spent": (0, None),
}


def validate_patch(patch: dict) -> dict:
    """Return the patch without unset fields, rejecting anything out of range."""
    unknown = set(patch) - set(DEFAULTS)
    if unknown:
        raise errors.ValidationError(f"Unknown progress fields: {', '.join(sorted(unknown))}")

    clean = {}
    for field, value in patch.items():
        if value is None:
            continue
        if field == "completed":
            if not isinstance(value, bool):
                raise errors.ValidationError("completed must be a boolean")
        else:
            if not isinstance(value, int) or isinstance(value, bool):
                raise errors.ValidationError(f"{field} must be an integer")
            low, high = RANGES[field]
            if value < low or (high is not None and value > high):
                bounds = f"{low}-{high}" if high is not None else f">= {low}"
                raise errors.ValidationError(f"{field} must be in range {bounds}, got {value}")
        clean[field] = value
    return clean


def get_progress(store, user_id: str, course_id: str) -> UserProgress:
    record = store.get_progress(user_id, course_id)
    if not record:
        raise errors.NotFound("Progress not found")
    return record


def list_for_user(store, user_id: str):
    return store.list_progress(user_id)


def upsert(store, user_id: str, course_id: str, patch: dict, enforce_step_order: Optional[bool] = None) -> UserProgress:
    fields = validate_patch(patch)
    get_user(store, user_id)
    get_course(store, course_id)

    if enforce_step_order is None:
        enforce_step_order = settings.ENFORCE_STEP_MONOTONIC

    with store.locked("progress", user_id, course_id):
        record = store.get_progress(user_id, course_id)
        now = datetime.now(timezone.utc)

        if record is None:
            values = {**DEFAULTS, **fields}
            record = UserProgress(id=str(uuid.uuid4()), user_id=user_id, course_id=course_id,
                                  last_accessed=now, **values)
            logger.info("Progress started user=%s course=%s", user_id, course_id)
        else:
            # Completion is one-way
            if record.completed and fields.get("completed") is False:
                raise errors.ValidationError("A completed course cannot be marked incomplete")
            if enforce_step_order and fields.get("current_step", record.current_step) < record.current_step:
                raise errors.ValidationError(
                    f"current_step cannot move back from {record.current_step} to {fields['current_step']}"
                )
            for field, value in fields.items():
                setattr(record, field, value)
            record.last_accessed = now

        return store.save_progress(record)
