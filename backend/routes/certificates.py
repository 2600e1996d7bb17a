# backend/routes/certificates.py
from typing import List

from fastapi import APIRouter, Depends

from models.users import User
from schemas.certificate import CertificateResponse
from services import certification
from storage.provider import get_store
from utils.tokenJWT import ensure_self_or_admin, get_current_user

router = APIRouter(prefix="/api/users/{user_id}/certificates", tags=["Certificates"])


@router.get("", response_model=List[CertificateResponse])
def list_certificates(user_id: str, store=Depends(get_store), current_user: User = Depends(get_current_user)):
    ensure_self_or_admin(current_user, user_id)
    return certification.list_for_user(store, user_id)
