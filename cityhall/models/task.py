
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from cityhall.db.session import Base
from cityhall.models.enums import TaskStatus, TaskPriority, enum_column_type
from cityhall.utils.clock import utcnow

class Task(Base):
    __tablename__ = "tasks"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    assignee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    assigned_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    due_date = Column(DateTime, nullable=True)
    status = Column(enum_column_type(TaskStatus, "task_status"), nullable=False, default=TaskStatus.PENDING)
    priority = Column(enum_column_type(TaskPriority, "task_priority"), nullable=False, default=TaskPriority.MEDIUM)
    department = Column(String(120), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    assignee = relationship("User", foreign_keys=[assignee_id], back_populates="assigned_tasks")
    creator = relationship("User", foreign_keys=[assigned_by], back_populates="created_tasks")
