# backend/routes/notices.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from models.users import User
from schemas.notice import NoticeCreate, NoticeResponse, NoticeUpdate
from services import notices
from storage.provider import get_store
from utils import errors
from utils.audit import write_log, client_ip
from utils.tokenJWT import get_optional_user, is_admin, role_required

router = APIRouter(prefix="/api/notices", tags=["Notices"])

# Every mutation goes through this capability check
admin_only = role_required("admin")


@router.get("", response_model=List[NoticeResponse])
def list_notices(store=Depends(get_store)):
    return notices.list_notices(store)


# Reading a notice counts a view; admins can preview with track=false
@router.get("/{notice_id}", response_model=NoticeResponse)
def get_notice(
    notice_id: str,
    track: bool = Query(True, description="Count this read as a view"),
    store=Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    if track:
        return notices.view(store, notice_id)
    if not is_admin(current_user):
        raise errors.Forbidden("Only admins can preview notices without counting a view")
    return notices.get_notice(store, notice_id)


@router.post("", response_model=NoticeResponse, status_code=status.HTTP_201_CREATED)
def create_notice(
    payload: NoticeCreate,
    request: Request,
    store=Depends(get_store),
    current_user: User = Depends(admin_only),
):
    notice = notices.create_notice(store, current_user.id, title=payload.title, content=payload.content)
    write_log(store, user_id=current_user.id, action="NOTICE_CREATE", resource="notice",
              ip=client_ip(request), meta={"notice_id": notice.id})
    return notice


@router.put("/{notice_id}", response_model=NoticeResponse)
def update_notice(
    notice_id: str,
    payload: NoticeUpdate,
    request: Request,
    store=Depends(get_store),
    current_user: User = Depends(admin_only),
):
    notice = notices.update_notice(store, notice_id, title=payload.title, content=payload.content)
    write_log(store, user_id=current_user.id, action="NOTICE_UPDATE", resource="notice",
              ip=client_ip(request), meta={"notice_id": notice_id})
    return notice


@router.delete("/{notice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notice(
    notice_id: str,
    request: Request,
    store=Depends(get_store),
    current_user: User = Depends(admin_only),
):
    notices.delete_notice(store, notice_id)
    write_log(store, user_id=current_user.id, action="NOTICE_DELETE", resource="notice",
              ip=client_ip(request), meta={"notice_id": notice_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
