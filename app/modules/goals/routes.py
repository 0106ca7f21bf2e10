from fastapi import APIRouter, Depends
from app.core.dates import parse_month
from app.core.dependencies import get_current_user
from app.core.schemas import OkResponse
from app.database.supabase_client import get_supabase
from app.modules.goals.schemas import (
    GoalCreate, GoalUpdate, GoalResponse, GoalWithChecksResponse
)
from app.modules.goals.service import GoalService
from app.modules.users.schemas import UserRecord
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/goals", tags=["goals"])


def get_goal_service(supabase: Client = Depends(get_supabase)) -> GoalService:
    return GoalService(supabase)


@router.get("", response_model=List[GoalWithChecksResponse])
async def list_goals(
    month: Optional[str] = None,
    current_user: UserRecord = Depends(get_current_user),
    service: GoalService = Depends(get_goal_service)
):
    """List the caller's goals for a month (YYYY-MM, default current month) with their checks"""
    return service.list_goals(current_user.id, parse_month(month))


@router.post("", response_model=GoalResponse, status_code=201)
async def create_goal(
    goal_data: GoalCreate,
    current_user: UserRecord = Depends(get_current_user),
    service: GoalService = Depends(get_goal_service)
):
    """Create a goal for the caller"""
    return service.create_goal(current_user, goal_data)


@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: str,
    goal_data: GoalUpdate,
    current_user: UserRecord = Depends(get_current_user),
    service: GoalService = Depends(get_goal_service)
):
    """Update only the supplied fields of a goal the caller owns"""
    return service.update_goal(current_user.id, goal_id, goal_data)


@router.delete("/{goal_id}", response_model=OkResponse)
async def delete_goal(
    goal_id: str,
    current_user: UserRecord = Depends(get_current_user),
    service: GoalService = Depends(get_goal_service)
):
    """Delete a goal the caller owns (no-op for any other id)"""
    service.delete_goal(current_user.id, goal_id)
    return OkResponse()
