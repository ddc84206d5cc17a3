
from datetime import datetime
from pydantic import BaseModel, Field
from cityhall.models.enums import UserRole

class UserOut(BaseModel):
    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole
    department: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class UserStatusIn(BaseModel):
    user_id: int = Field(alias="userId")
    is_active: bool = Field(alias="isActive")

    class Config:
        populate_by_name = True
