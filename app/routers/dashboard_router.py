# /app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_current_user
from ..db.models.user_model import User
from ..models.analytics_model import DashboardStats
from ..services import analytics_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Get Dashboard Summary",
    description="Blog, article and view totals plus the most recent articles for the home dashboard."
)
def get_dashboard_stats(
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service)
):
    # Thin router: delegate straight to the service layer.
    return analytics_service.get_dashboard_stats(db=db, user_id=current_user.id)
