# backend/routes/auth.py
from fastapi import APIRouter, Depends, Request, status

from models.users import User
from schemas import user as schemas
from services import identity
from storage.provider import get_store
from utils import errors
from utils.audit import write_log, client_ip
from utils.tokenJWT import get_current_user, token_for

router = APIRouter(prefix="/api/auth", tags=["Auth"])

# Register a new user
@router.post("/register", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: schemas.UserCreate, request: Request, store=Depends(get_store)):
    try:
        user = identity.register(
            store,
            username=payload.username,
            email=payload.email,
            password=payload.password,
            department=payload.department,
        )
    except errors.Conflict:
        # Log failed registration before reporting the conflict
        write_log(store, user_id=None, action="REGISTER", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": payload.email, "reason": "Email exists"})
        raise

    write_log(store, user_id=user.id, action="REGISTER", resource="auth",
              ip=client_ip(request), meta={"email": user.email})
    return user


# Authenticate user and issue a bearer token
@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.UserLogin, request: Request, store=Depends(get_store)):
    try:
        user = identity.authenticate(store, payload.email, payload.password)
    except errors.Unauthorized:
        write_log(store, user_id=None, action="LOGIN", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": payload.email})
        raise

    write_log(store, user_id=user.id, action="LOGIN", resource="auth",
              ip=client_ip(request), meta={"email": user.email})

    result = schemas.UserResponse.model_validate(user).model_dump()
    return schemas.LoginResponse(**result, access_token=token_for(user))


# Tokens are stateless; the client drops its copy
@router.post("/logout")
def logout(request: Request, current_user: User = Depends(get_current_user), store=Depends(get_store)):
    write_log(store, user_id=current_user.id, action="LOGOUT", resource="auth", ip=client_ip(request))
    return {"message": "Logged out successfully"}


# Retrieve the authenticated principal
@router.get("/me", response_model=schemas.Principal)
def me(current_user: User = Depends(get_current_user)):
    return current_user
