
import logging
from sqlalchemy import case, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cityhall.errors import ConstraintViolationError, NotFoundError
from cityhall.models.enums import ACTIVE_TASK_STATUSES, PRIORITY_RANK, TaskStatus, UserRole
from cityhall.models.task import Task
from cityhall.models.user import User
from cityhall.schemas.task import TaskCreate
from cityhall.utils.clock import utcnow

logger = logging.getLogger(__name__)

priority_rank = case(
    *[(Task.priority == p, rank) for p, rank in PRIORITY_RANK.items()],
    else_=0,
)

# most severe first, then earliest due date with undated tasks last
WORKLOAD_ORDER = (priority_rank.desc(), Task.due_date.is_(None), Task.due_date.asc(), Task.id.asc())

def _involving(user_id: int):
    return or_(Task.assignee_id == user_id, Task.assigned_by == user_id)

def _get_task(db: Session, task_id: int) -> Task:
    task = db.get(Task, task_id)
    if task is None:
        raise NotFoundError(f"Task with id {task_id} not found")
    return task

def create_task(db: Session, body: TaskCreate, assigned_by: int) -> Task:
    task = Task(
        title=body.title,
        description=body.description,
        assignee_id=body.assignee_id,
        assigned_by=assigned_by,
        due_date=body.due_date,
        status=TaskStatus.PENDING,
        priority=body.priority,
        department=body.department,
    )
    db.add(task)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("task creation rejected (assignee=%s, assigner=%s): %s", body.assignee_id, assigned_by, e.orig)
        raise ConstraintViolationError("Assignee or assigner does not exist")
    db.refresh(task)
    logger.info("task id=%s assigned to user id=%s by user id=%s", task.id, task.assignee_id, assigned_by)
    return task

def get_tasks_assigned_to_user(db: Session, user_id: int) -> list[Task]:
    return db.query(Task).filter(Task.assignee_id == user_id).order_by(*WORKLOAD_ORDER).all()

def get_tasks_created_by_user(db: Session, user_id: int) -> list[Task]:
    return db.query(Task).filter(Task.assigned_by == user_id).order_by(*WORKLOAD_ORDER).all()

def get_tasks_by_status(db: Session, status: TaskStatus, user_id: int) -> list[Task]:
    return (db.query(Task)
              .filter(Task.status == status, _involving(user_id))
              .order_by(Task.created_at.desc(), Task.id.desc())
              .all())

def get_tasks_by_department(db: Session, department: str, user_id: int) -> list[Task]:
    """Department tasks the requester may oversee.

    The Mayor and the head of that department see every task filed under it;
    anyone else only the ones they assigned or were assigned.
    """
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")

    q = db.query(Task).filter(Task.department == department)
    oversees = user.role == UserRole.MAYOR or (
        user.role == UserRole.DEPARTMENT_HEAD and user.department == department
    )
    if not oversees:
        q = q.filter(_involving(user_id))
    return q.order_by(*WORKLOAD_ORDER).all()

def update_task_status(db: Session, task_id: int, status: TaskStatus, user_id: int) -> Task:
    task = _get_task(db, task_id)
    previous = task.status
    task.status = status
    task.updated_at = utcnow()
    db.commit()
    db.refresh(task)
    logger.info("task id=%s status %s -> %s by user id=%s", task.id, previous.value, status.value, user_id)
    return task

def overdue_filter(now):
    return (
        Task.due_date.is_not(None),
        Task.due_date < now,
        Task.status.in_(ACTIVE_TASK_STATUSES),
    )

def get_overdue_tasks(db: Session, user_id: int) -> list[Task]:
    return (db.query(Task)
              .filter(Task.assignee_id == user_id, *overdue_filter(utcnow()))
              .order_by(Task.due_date.asc(), Task.id.asc())
              .all())
