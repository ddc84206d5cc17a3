
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from cityhall.auth.deps import get_db
from cityhall.schemas.dashboard import DashboardData, QuickStats
from cityhall.dashboard import service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("/getData", response_model=DashboardData)
def get_data(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_dashboard_data(db, user_id)

@router.get("/getQuickStats", response_model=QuickStats)
def get_quick_stats(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_quick_stats(db, user_id)
