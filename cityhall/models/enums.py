import enum
from sqlalchemy import Enum

class UserRole(str, enum.Enum):
    MAYOR = "Mayor"
    SECRETARY = "Secretary"
    DEPARTMENT_HEAD = "Department Head"

TOP_LEVEL_ROLE = UserRole.MAYOR

class DocumentCategory(str, enum.Enum):
    ADMINISTRATIVE = "Administrative"
    LEGAL = "Legal"
    FINANCIAL = "Financial"
    URBAN_PLANNING = "Urban Planning"
    PUBLIC_WORKS = "Public Works"
    SOCIAL_SERVICES = "Social Services"
    OTHER = "Other"

class TaskStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

ACTIVE_TASK_STATUSES = (TaskStatus.PENDING, TaskStatus.IN_PROGRESS)

class TaskPriority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"

# severity rank, higher is more severe
PRIORITY_RANK = {
    TaskPriority.LOW: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.HIGH: 3,
    TaskPriority.URGENT: 4,
}

def enum_column_type(enum_cls, name: str):
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda e: [m.value for m in e],
        validate_strings=True,
    )
