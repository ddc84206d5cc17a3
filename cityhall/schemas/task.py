
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from cityhall.models.enums import TaskStatus, TaskPriority
from cityhall.utils.clock import to_naive_utc

class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    assignee_id: int
    due_date: datetime | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    department: str | None = None

    @field_validator("due_date")
    @classmethod
    def _naive_utc(cls, v):
        return to_naive_utc(v)

class TaskCreateIn(TaskCreate):
    assigned_by: int = Field(alias="assignedBy")

    class Config:
        populate_by_name = True

class TaskStatusIn(BaseModel):
    id: int
    status: TaskStatus
    user_id: int = Field(alias="userId")

    class Config:
        populate_by_name = True

class TaskOut(BaseModel):
    id: int
    title: str
    description: str | None
    assignee_id: int
    assigned_by: int
    due_date: datetime | None
    status: TaskStatus
    priority: TaskPriority
    department: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
