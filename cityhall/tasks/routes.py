
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from cityhall.auth.deps import get_db
from cityhall.models.enums import TaskStatus
from cityhall.schemas.task import TaskCreateIn, TaskStatusIn, TaskOut
from cityhall.tasks import service

router = APIRouter(prefix="/tasks", tags=["tasks"])

@router.post("/create", response_model=TaskOut)
def create(body: TaskCreateIn, db: Session = Depends(get_db)):
    return service.create_task(db, body, body.assigned_by)

@router.get("/getAssignedToUser", response_model=list[TaskOut])
def assigned_to_user(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_tasks_assigned_to_user(db, user_id)

@router.get("/getCreatedByUser", response_model=list[TaskOut])
def created_by_user(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_tasks_created_by_user(db, user_id)

@router.get("/getByStatus", response_model=list[TaskOut])
def by_status(status: TaskStatus, user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_tasks_by_status(db, status, user_id)

@router.get("/getByDepartment", response_model=list[TaskOut])
def by_department(department: str, user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_tasks_by_department(db, department, user_id)

@router.get("/getOverdue", response_model=list[TaskOut])
def overdue(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_overdue_tasks(db, user_id)

@router.post("/updateStatus", response_model=TaskOut)
def update_status(body: TaskStatusIn, db: Session = Depends(get_db)):
    return service.update_task_status(db, body.id, body.status, body.user_id)
