# micafe/routes/auth.py
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from micafe.database import Database, get_db
from micafe.exceptions import DuplicateEmailError, InvalidCredentialsError
from micafe.models.users import User
from micafe.schemas import user as schemas
from micafe.services import accounts
from micafe.services.navigation import landing_page, navigate
from micafe.utils.audit import client_ip, write_log
from micafe.utils.tokenJWT import get_current_user, get_optional_user, token_for

router = APIRouter(tags=["Auth"])


def _token_response(user: User) -> schemas.Token:
    return schemas.Token(
        access_token=token_for(user),
        role=user.role,
        landing_page=landing_page(user.role).value,
    )


# Register a new customer and log them in
@router.post("/register", response_model=schemas.Token)
def register(payload: schemas.UserCreate, request: Request, db: Database = Depends(get_db)):
    try:
        new_user = accounts.register(db, name=payload.name, email=payload.email, password=payload.password)
    except DuplicateEmailError:
        write_log(db, user_id=None, action="REGISTER", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": payload.email, "reason": "Email exists"})
        raise

    # Log successful registration event
    write_log(db, user_id=new_user.id, action="REGISTER", resource="auth", status="SUCCESS",
              ip=client_ip(request), meta={"email": new_user.email})
    return _token_response(new_user)


# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.UserLogin, request: Request, db: Database = Depends(get_db)):
    try:
        user = accounts.authenticate(db, payload.email, payload.password)
    except InvalidCredentialsError:
        write_log(db, user_id=None, action="LOGIN", resource="auth", status="FAIL",
                  ip=client_ip(request), meta={"email": payload.email})
        raise

    write_log(db, user_id=user.id, action="LOGIN", resource="auth", status="SUCCESS",
              ip=client_ip(request), meta={"email": user.email})
    return _token_response(user)


# Drop the caller's cart; the token itself simply expires
@router.post("/logout")
def logout(request: Request, db: Database = Depends(get_db), current_user: User = Depends(get_current_user)):
    accounts.logout(db, current_user)
    write_log(db, user_id=current_user.id, action="LOGOUT", resource="auth", status="SUCCESS",
              ip=client_ip(request))
    return {"message": "Logged out", "landing_page": landing_page(None).value}


# Retrieve current authenticated user details
@router.get("/me", response_model=schemas.UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user


# Resolve which page the caller may see; forbidden pages redirect silently
@router.get("/navigate")
def resolve_page(
    page: str = Query(..., description="Requested page"),
    current_user: Optional[User] = Depends(get_optional_user),
):
    role = current_user.role if current_user else None
    resolved = navigate(page, role)
    return {"requested": page, "page": resolved.value, "redirected": resolved.value != page}
