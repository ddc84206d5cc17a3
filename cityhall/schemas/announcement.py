
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from cityhall.models.enums import UserRole
from cityhall.utils.clock import to_naive_utc

class AnnouncementCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    target_roles: list[UserRole] | None = None
    is_urgent: bool = False
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def _naive_utc(cls, v):
        return to_naive_utc(v)

class AnnouncementCreateIn(AnnouncementCreate):
    author_id: int = Field(alias="authorId")

    class Config:
        populate_by_name = True

class AnnouncementDeactivateIn(BaseModel):
    announcement_id: int = Field(alias="announcementId")
    user_id: int = Field(alias="userId")

    class Config:
        populate_by_name = True

class AnnouncementOut(BaseModel):
    id: int
    title: str
    content: str
    author_id: int
    target_roles: list[UserRole] | None
    is_urgent: bool
    is_active: bool
    expires_at: datetime | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
