from __future__ import annotations

import pytest

from seed import seed_demo_data
from services import catalog, notices
from utils import errors


def _course(store, course_id, **overrides):
    fields = dict(
        course_id=course_id, title=f"Course {course_id}", description="", type="tbm", duration=7,
    )
    fields.update(overrides)
    return catalog.create_course(store, **fields)


def test_list_active_skips_inactive_courses_in_insertion_order(store):
    _course(store, "c-1")
    _course(store, "c-2", is_active=False)
    _course(store, "c-3")

    assert [c.id for c in catalog.list_active(store)] == ["c-1", "c-3"]


def test_get_missing_course_is_not_found(store):
    with pytest.raises(errors.NotFound):
        catalog.get_course(store, "nope")


@pytest.mark.parametrize(
    "overrides",
    [{"type": "fire-drill"}, {"duration": 0}, {"duration": -5}, {"title": "  "}],
)
def test_create_course_rejects_invalid_payload(store, overrides):
    with pytest.raises(errors.ValidationError):
        _course(store, "bad", **overrides)


def test_seed_loads_demo_data_once(store):
    assert seed_demo_data(store) is True
    assert seed_demo_data(store) is False

    assert [c.id for c in catalog.list_active(store)] == ["course-1", "course-2", "course-3"]
    assert len(notices.list_notices(store)) == 2
    assert store.get_user_by_email("admin@example.com").role == "admin"
