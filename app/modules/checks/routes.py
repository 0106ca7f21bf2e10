from fastapi import APIRouter, Depends, Query
from app.core.dates import parse_day
from app.core.dependencies import get_current_user
from app.core.exceptions import InvalidArgument
from app.core.schemas import OkResponse
from app.database.supabase_client import get_supabase
from app.modules.checks.schemas import CheckCreate, CheckResponse
from app.modules.checks.service import CheckService
from app.modules.users.schemas import UserRecord
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/checks", tags=["checks"])


def get_check_service(supabase: Client = Depends(get_supabase)) -> CheckService:
    return CheckService(supabase)


@router.post("", response_model=CheckResponse, status_code=201)
async def record_check(
    check_data: CheckCreate,
    current_user: UserRecord = Depends(get_current_user),
    service: CheckService = Depends(get_check_service)
):
    """Record (or overwrite) a day's progress on one of the caller's goals"""
    if not check_data.goal_id or not check_data.date:
        raise InvalidArgument("goalId and date are required")
    day = parse_day(check_data.date)
    return service.record_check(current_user.id, check_data.goal_id, day, check_data.value)


@router.delete("", response_model=OkResponse)
async def delete_check(
    goal_id: Optional[str] = Query(None, alias="goalId"),
    date: Optional[str] = None,
    current_user: UserRecord = Depends(get_current_user),
    service: CheckService = Depends(get_check_service)
):
    """Remove the check for a goal and day"""
    if not goal_id or not date:
        raise InvalidArgument("goalId and date query params are required")
    service.delete_check(current_user.id, goal_id, parse_day(date))
    return OkResponse()
