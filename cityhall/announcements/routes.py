
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from cityhall.auth.deps import get_db
from cityhall.models.enums import UserRole
from cityhall.schemas.announcement import AnnouncementCreateIn, AnnouncementDeactivateIn, AnnouncementOut
from cityhall.announcements import service

router = APIRouter(prefix="/announcements", tags=["announcements"])

@router.post("/create", response_model=AnnouncementOut)
def create(body: AnnouncementCreateIn, db: Session = Depends(get_db)):
    return service.create_announcement(db, body, body.author_id)

@router.get("/getForUser", response_model=list[AnnouncementOut])
def for_user(role: UserRole, db: Session = Depends(get_db)):
    return service.get_announcements_for_user(db, role)

@router.get("/getAll", response_model=list[AnnouncementOut])
def get_all(db: Session = Depends(get_db)):
    return service.get_all_announcements(db)

@router.get("/getUrgent", response_model=list[AnnouncementOut])
def urgent(role: UserRole, db: Session = Depends(get_db)):
    return service.get_urgent_announcements(db, role)

@router.post("/deactivate", response_model=AnnouncementOut)
def deactivate(body: AnnouncementDeactivateIn, db: Session = Depends(get_db)):
    return service.deactivate_announcement(db, body.announcement_id, body.user_id)
