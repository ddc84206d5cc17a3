"""Who may see which announcement or document.

The predicates work on loaded rows; the ``*_clause`` helpers express the same
rules as SQL so lists can be filtered by the database.
"""
from datetime import datetime
from typing import Iterable
from sqlalchemy import and_, or_
from cityhall.models.announcement import Announcement
from cityhall.models.document import Document
from cityhall.models.enums import UserRole


def announcement_targets(role: UserRole, target_roles: Iterable[UserRole] | None) -> bool:
    if not target_roles:
        return True
    return UserRole(role) in {UserRole(r) for r in target_roles}


def announcement_is_live(announcement: Announcement, now: datetime) -> bool:
    if not announcement.is_active:
        return False
    return announcement.expires_at is None or announcement.expires_at >= now


def announcement_visible_to(announcement: Announcement, role: UserRole, now: datetime) -> bool:
    return announcement_is_live(announcement, now) and announcement_targets(role, announcement.roles)


def document_visible_to(document: Document, user_id: int) -> bool:
    return bool(document.is_public) or document.uploaded_by == user_id


def live_announcement_clause(now: datetime):
    return and_(
        Announcement.is_active.is_(True),
        or_(Announcement.expires_at.is_(None), Announcement.expires_at >= now),
    )


def document_visibility_clause(user_id: int):
    return or_(Document.is_public.is_(True), Document.uploaded_by == user_id)
