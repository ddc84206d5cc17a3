"""Dashboard aggregation.

Composes the announcement, task and document reads for one user into a
single response. The user lookup runs first; nothing else is queried when it
fails.
"""
import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
from cityhall.announcements.service import visible_announcements
from cityhall.errors import NotFoundError
from cityhall.models.document import Document
from cityhall.models.enums import ACTIVE_TASK_STATUSES, TaskStatus
from cityhall.models.task import Task
from cityhall.models.user import User
from cityhall.schemas.announcement import AnnouncementOut
from cityhall.schemas.dashboard import DashboardData, QuickStats, TaskSummary
from cityhall.schemas.document import DocumentOut
from cityhall.schemas.task import TaskOut
from cityhall.schemas.user import UserOut
from cityhall.tasks.service import WORKLOAD_ORDER, overdue_filter
from cityhall.utils.clock import utcnow
from cityhall.utils.visibility import document_visibility_clause

logger = logging.getLogger(__name__)

ANNOUNCEMENT_LIMIT = 5
TASK_LIMIT = 10
DOCUMENT_LIMIT = 5

def _load_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        logger.warning("dashboard requested for unknown user id=%s", user_id)
        raise NotFoundError("User not found")
    return user

def task_summary(db: Session, user_id: int) -> TaskSummary:
    rows = (db.query(Task.status, func.count(Task.id))
              .filter(Task.assignee_id == user_id)
              .group_by(Task.status)
              .all())
    summary = TaskSummary()
    for status, n in rows:
        summary.total += n
        if status == TaskStatus.PENDING:
            summary.pending = n
        elif status == TaskStatus.IN_PROGRESS:
            summary.in_progress = n
        elif status == TaskStatus.COMPLETED:
            summary.completed = n
    return summary

def get_dashboard_data(db: Session, user_id: int) -> DashboardData:
    user = _load_user(db, user_id)
    now = utcnow()

    announcements = visible_announcements(db, user.role, limit=ANNOUNCEMENT_LIMIT, now=now)

    pending_tasks = (db.query(Task)
                       .filter(Task.assignee_id == user.id, Task.status.in_(ACTIVE_TASK_STATUSES))
                       .order_by(*WORKLOAD_ORDER)
                       .limit(TASK_LIMIT)
                       .all())

    recent_documents = (db.query(Document)
                          .filter(document_visibility_clause(user.id))
                          .order_by(Document.created_at.desc(), Document.id.desc())
                          .limit(DOCUMENT_LIMIT)
                          .all())

    return DashboardData(
        user=UserOut.model_validate(user),
        announcements=[AnnouncementOut.model_validate(a) for a in announcements],
        pending_tasks=[TaskOut.model_validate(t) for t in pending_tasks],
        recent_documents=[DocumentOut.model_validate(d) for d in recent_documents],
        task_summary=task_summary(db, user.id),
    )

def get_quick_stats(db: Session, user_id: int) -> QuickStats:
    user = _load_user(db, user_id)
    now = utcnow()

    assigned = db.query(func.count(Task.id)).filter(Task.assignee_id == user.id)
    total = assigned.scalar()
    pending = assigned.filter(Task.status == TaskStatus.PENDING).scalar()
    overdue = assigned.filter(*overdue_filter(now)).scalar()
    urgent = len(visible_announcements(db, user.role, urgent_only=True, now=now))

    return QuickStats(
        totalTasks=total or 0,
        pendingTasks=pending or 0,
        overdueFiles=overdue or 0,
        urgentAnnouncements=urgent,
    )
