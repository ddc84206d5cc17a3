"""Announcement handlers.

Target roles are kept as a JSON list, so the role match is applied to the
rows returned by the live-announcement query rather than inside SQL.
"""
import logging
from datetime import datetime
from sqlalchemy.orm import Session
from cityhall.errors import NotFoundError, PermissionDeniedError
from cityhall.models.announcement import Announcement
from cityhall.models.enums import TOP_LEVEL_ROLE, UserRole
from cityhall.models.user import User
from cityhall.schemas.announcement import AnnouncementCreate
from cityhall.utils.clock import utcnow
from cityhall.utils.visibility import announcement_targets, live_announcement_clause

logger = logging.getLogger(__name__)

FEED_ORDER = (Announcement.is_urgent.desc(), Announcement.created_at.desc(), Announcement.id.desc())

def visible_announcements(
    db: Session,
    role: UserRole,
    *,
    urgent_only: bool = False,
    limit: int | None = None,
    now: datetime | None = None,
) -> list[Announcement]:
    q = db.query(Announcement).filter(live_announcement_clause(now or utcnow()))
    if urgent_only:
        q = q.filter(Announcement.is_urgent.is_(True))
    visible = [a for a in q.order_by(*FEED_ORDER) if announcement_targets(role, a.roles)]
    return visible[:limit] if limit is not None else visible

def create_announcement(db: Session, body: AnnouncementCreate, author_id: int) -> Announcement:
    if db.get(User, author_id) is None:
        raise NotFoundError("Author not found")
    ann = Announcement(
        title=body.title,
        content=body.content,
        author_id=author_id,
        target_roles=body.target_roles,
        is_urgent=body.is_urgent,
        is_active=True,
        expires_at=body.expires_at,
    )
    db.add(ann)
    db.commit()
    db.refresh(ann)
    logger.info("announcement id=%s created by user id=%s (urgent=%s)", ann.id, author_id, ann.is_urgent)
    return ann

def get_announcements_for_user(db: Session, role: UserRole) -> list[Announcement]:
    return visible_announcements(db, role)

def get_urgent_announcements(db: Session, role: UserRole) -> list[Announcement]:
    return visible_announcements(db, role, urgent_only=True)

def get_all_announcements(db: Session) -> list[Announcement]:
    return (db.query(Announcement)
              .filter(Announcement.is_active.is_(True))
              .order_by(*FEED_ORDER)
              .all())

def deactivate_announcement(db: Session, announcement_id: int, user_id: int) -> Announcement:
    ann = db.get(Announcement, announcement_id)
    if ann is None:
        raise NotFoundError("Announcement not found")
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")

    if ann.author_id != user.id and user.role != TOP_LEVEL_ROLE:
        logger.warning("user id=%s may not deactivate announcement id=%s", user.id, ann.id)
        raise PermissionDeniedError("Insufficient permissions to deactivate announcement")

    ann.is_active = False
    ann.updated_at = utcnow()
    db.commit()
    db.refresh(ann)
    logger.info("announcement id=%s deactivated by user id=%s", ann.id, user.id)
    return ann
