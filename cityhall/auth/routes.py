
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from cityhall.auth.deps import get_db, get_settings, get_token_user, COOKIE_NAME
from cityhall.config import Settings
from cityhall.models.user import User
from cityhall.schemas.auth import RegisterIn, LoginIn, LoginOut
from cityhall.schemas.user import UserOut
from cityhall.auth.service import register_user, login_user, get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])

def set_auth_cookie(response: Response, token: str, settings: Settings):
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="Lax",
        secure=settings.app_env in ("prod", "production"),
        path="/",
        max_age=settings.access_token_expire_minutes * 60,
    )

@router.post("/login", response_model=LoginOut)
def login(
    body: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user, token = login_user(db, settings, body.email, body.password)
    set_auth_cookie(response, token, settings)
    return LoginOut(user=UserOut.model_validate(user), token=token)

@router.post("/register", response_model=UserOut)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    return register_user(db, body)

@router.get("/getCurrentUser", response_model=UserOut | None)
def current_user(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return get_current_user(db, user_id)

@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_token_user)):
    return user

@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(COOKIE_NAME, path="/")
    return {"ok": True}
