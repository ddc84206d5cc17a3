
from pydantic import BaseModel
from cityhall.schemas.user import UserOut
from cityhall.schemas.task import TaskOut
from cityhall.schemas.document import DocumentOut
from cityhall.schemas.announcement import AnnouncementOut

class TaskSummary(BaseModel):
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0

class DashboardData(BaseModel):
    user: UserOut
    announcements: list[AnnouncementOut]
    pending_tasks: list[TaskOut]
    recent_documents: list[DocumentOut]
    task_summary: TaskSummary

class QuickStats(BaseModel):
    totalTasks: int
    pendingTasks: int
    overdueFiles: int
    urgentAnnouncements: int
