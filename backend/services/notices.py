# backend/services/notices.py
"""Notice board.

Reading a notice and counting the view are separate steps: ``get`` never
writes, ``record_view`` does, and ``view`` runs both for ordinary readers.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from models.notice import Notice
from utils import errors

logger = logging.getLogger(__name__)


def _require_text(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise errors.ValidationError(f"Notice {field} must be a non-empty string")
    return value.strip()


def list_notices(store):
    return store.list_notices()


def get_notice(store, notice_id: str) -> Notice:
    notice = store.get_notice(notice_id)
    if not notice:
        raise errors.NotFound("Notice not found")
    return notice


def record_view(store, notice_id: str) -> Notice:
    with store.locked("notice", notice_id):
        notice = get_notice(store, notice_id)
        notice.view_count = (notice.view_count or 0) + 1
        return store.save_notice(notice)


def view(store, notice_id: str) -> Notice:
    return record_view(store, notice_id)


def create_notice(store, author_id: str, *, title, content) -> Notice:
    title = _require_text(title, "title")
    content = _require_text(content, "content")

    with store.locked("notice-seq"):
        notice = Notice(
            id=str(uuid.uuid4()),
            author_id=author_id,
            title=title,
            content=content,
            created_at=datetime.now(timezone.utc),
            view_count=0,
            seq=store.last_notice_seq() + 1,
        )
        store.add_notice(notice)
    logger.info("Notice %s created by %s", notice.id, author_id)
    return notice


def update_notice(store, notice_id: str, *, title: Optional[str] = None, content: Optional[str] = None) -> Notice:
    changes = {}
    if title is not None:
        changes["title"] = _require_text(title, "title")
    if content is not None:
        changes["content"] = _require_text(content, "content")

    with store.locked("notice", notice_id):
        notice = get_notice(store, notice_id)
        for field, value in changes.items():
            setattr(notice, field, value)
        return store.save_notice(notice)


def delete_notice(store, notice_id: str) -> None:
    with store.locked("notice", notice_id):
        notice = get_notice(store, notice_id)
        store.delete_notice(notice)
    logger.info("Notice %s deleted", notice_id)
