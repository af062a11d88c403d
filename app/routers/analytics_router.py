# /app/routers/analytics_router.py

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ..core.deps import get_current_user
from ..core.errors import NotFoundError, to_http_exception
from ..db.models.user_model import User
from ..models import analytics_model
from ..services import analytics_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post(
    "/event",
    response_model=analytics_model.AnalyticsEvent,
    status_code=status.HTTP_201_CREATED,
    summary="Record an Analytics Event",
    description="Unauthenticated. Called by published blog pages for page views, scrolls and clicks.",
)
def record_event(event: analytics_model.AnalyticsEventCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return analytics_service.record_event(db=db, event=event)
    except NotFoundError as e:
        raise to_http_exception(e)


@router.get("/chart", response_model=List[analytics_model.ChartPoint], summary="Get Daily Views Chart")
def get_chart(
    days: int = Query(7, ge=1, le=90),
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    return analytics_service.get_chart_data(db=db, user_id=current_user.id, days=days)


@router.get("/detailed", response_model=analytics_model.DetailedAnalytics, summary="Get Detailed Analytics")
def get_detailed_analytics(
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    return analytics_service.get_detailed_analytics(db=db, user_id=current_user.id)
