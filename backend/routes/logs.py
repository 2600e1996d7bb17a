# backend/routes/logs.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional, Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from models.users import User
from storage.provider import get_store
from utils.tokenJWT import role_required

router = APIRouter(prefix="/api/logs", tags=["Logs"])

# --- SCHEMAS ---
class LogResponse(BaseModel):
    id: int
    user_id: Optional[str] = None
    action: str
    resource: str
    status: str
    ip: Optional[str] = None
    ts: datetime
    meta: Optional[Any] = None

    model_config = ConfigDict(from_attributes=True)

class LogPage(BaseModel):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int

# --- ENDPOINT ---
@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    action: Optional[str] = Query(None, description="Filter by action"),
    user_id: Optional[str] = Query(None, description="Filter by user id"),
    resource: Optional[str] = Query(None, description="Filter by resource"),
    status: Optional[str] = Query(None, description="Filter by status (SUCCESS/FAIL)"),
    store=Depends(get_store),
    current_user: User = Depends(role_required("admin")),
):
    items, total = store.list_logs(
        action=action,
        user_id=user_id,
        resource=resource,
        status=status,
        offset=(page - 1) * page_size,
        limit=page_size,
    )
    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
    }
