
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cityhall.config import Settings
from cityhall.errors import ConflictError, InvalidCredentialsError, InactiveAccountError
from cityhall.models.user import User
from cityhall.schemas.auth import RegisterIn
from cityhall.utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "User with this email already exists"

def register_user(db: Session, body: RegisterIn) -> User:
    if db.query(User).filter(User.email == body.email).first():
        logger.warning("registration rejected, email already in use: %s", body.email)
        raise ConflictError(DUPLICATE_EMAIL)
    user = User(
        email=body.email,
        password_hash=hash_password(body.password),
        first_name=body.first_name,
        last_name=body.last_name,
        role=body.role,
        department=body.department,
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_EMAIL)
    db.refresh(user)
    logger.info("registered user id=%s role=%s", user.id, user.role.value)
    return user

def login_user(db: Session, settings: Settings, email: str, password: str) -> tuple[User, str]:
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password_hash):
        logger.warning("failed login for %s", email)
        raise InvalidCredentialsError()
    if not user.is_active:
        logger.warning("login refused for inactive user id=%s", user.id)
        raise InactiveAccountError()
    return user, create_access_token(str(user.id), settings)

def get_current_user(db: Session, user_id: int) -> User | None:
    user = db.get(User, user_id)
    if user is None or not user.is_active:
        return None
    return user
