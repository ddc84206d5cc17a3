
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from cityhall.auth.deps import get_db
from cityhall.models.enums import UserRole
from cityhall.schemas.user import UserOut, UserStatusIn
from cityhall.users import service

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/getAll", response_model=list[UserOut])
def get_all(db: Session = Depends(get_db)):
    return service.get_all_users(db)

@router.get("/getByRole", response_model=list[UserOut])
def get_by_role(role: UserRole, db: Session = Depends(get_db)):
    return service.get_users_by_role(db, role)

@router.get("/getByDepartment", response_model=list[UserOut])
def get_by_department(department: str, db: Session = Depends(get_db)):
    return service.get_users_by_department(db, department)

@router.post("/updateStatus", response_model=UserOut)
def update_status(body: UserStatusIn, db: Session = Depends(get_db)):
    return service.update_user_status(db, body.user_id, body.is_active)
