
import logging
from sqlalchemy.orm import Session
from cityhall.errors import NotFoundError
from cityhall.models.enums import UserRole
from cityhall.models.user import User
from cityhall.utils.clock import utcnow

logger = logging.getLogger(__name__)

def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()

def get_users_by_role(db: Session, role: UserRole) -> list[User]:
    return db.query(User).filter(User.role == role).order_by(User.id).all()

def get_users_by_department(db: Session, department: str | None) -> list[User]:
    q = db.query(User)
    if department is None:
        q = q.filter(User.department.is_(None))
    else:
        q = q.filter(User.department == department)
    return q.order_by(User.id).all()

def update_user_status(db: Session, user_id: int, is_active: bool) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"User with id {user_id} not found")
    user.is_active = is_active
    user.updated_at = utcnow()
    db.commit()
    db.refresh(user)
    logger.info("user id=%s is_active=%s", user.id, user.is_active)
    return user
