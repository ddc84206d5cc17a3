
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship, validates
from cityhall.db.session import Base
from cityhall.models.enums import UserRole
from cityhall.utils.clock import utcnow

class Announcement(Base):
    __tablename__ = "announcements"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # JSON list of role values; NULL targets every role
    target_roles = Column(JSON(none_as_null=True), nullable=True)
    is_urgent = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    author = relationship("User", back_populates="announcements")

    @validates("target_roles")
    def _store_role_values(self, key, roles):
        if not roles:
            return None
        return [UserRole(r).value for r in roles]

    @property
    def roles(self) -> list[UserRole] | None:
        if not self.target_roles:
            return None
        return [UserRole(r) for r in self.target_roles]
