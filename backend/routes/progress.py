# backend/routes/progress.py
import logging
from typing import List

from fastapi import APIRouter, Depends

from models.users import User
from schemas.progress import ProgressResponse, ProgressUpdate
from services import progress as progress_service
from storage.provider import get_store
from utils.tokenJWT import ensure_self_or_admin, get_current_user

router = APIRouter(prefix="/api/users/{user_id}/progress", tags=["Progress"])
logger = logging.getLogger(__name__)


# Progress for every course the user has started
@router.get("", response_model=List[ProgressResponse])
def list_progress(user_id: str, store=Depends(get_store), current_user: User = Depends(get_current_user)):
    ensure_self_or_admin(current_user, user_id)
    return progress_service.list_for_user(store, user_id)


@router.get("/{course_id}", response_model=ProgressResponse)
def get_progress(user_id: str, course_id: str, store=Depends(get_store),
                 current_user: User = Depends(get_current_user)):
    ensure_self_or_admin(current_user, user_id)
    return progress_service.get_progress(store, user_id, course_id)


# Create-or-update; the client sends whatever changed
@router.put("/{course_id}", response_model=ProgressResponse)
def update_progress(
    user_id: str,
    course_id: str,
    payload: ProgressUpdate,
    store=Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    ensure_self_or_admin(current_user, user_id)
    patch = payload.model_dump(exclude_unset=True)
    logger.debug("Progress update user=%s course=%s patch=%s", user_id, course_id, patch)
    return progress_service.upsert(store, user_id, course_id, patch)
