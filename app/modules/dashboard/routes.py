from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user
from app.database.supabase_client import get_supabase
from app.modules.dashboard.schemas import TeamDashboardResponse
from app.modules.dashboard.service import DashboardService
from app.modules.users.schemas import UserRecord
from supabase import Client

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("/team", response_model=TeamDashboardResponse, response_model_exclude_unset=True)
async def get_team_dashboard(
    current_user: UserRecord = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Aggregated progress for every member of the caller's team. inviteCode is present for admins only."""
    return service.build_team_summary(current_user)
