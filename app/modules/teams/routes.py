from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user
from app.core.schemas import OkResponse
from app.database.supabase_client import get_supabase
from app.modules.teams.schemas import (
    TeamCreate, TeamUpdate, TeamJoin,
    TeamCreatedResponse, TeamRenamedResponse, TeamInviteResponse, TeamJoinResponse
)
from app.modules.teams.service import TeamService
from app.modules.users.schemas import UserRecord
from supabase import Client

router = APIRouter(prefix="/team", tags=["team"])


def get_team_service(supabase: Client = Depends(get_supabase)) -> TeamService:
    return TeamService(supabase)


@router.post("/create", response_model=TeamCreatedResponse)
async def create_team(
    team_data: TeamCreate,
    current_user: UserRecord = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """Create a team; the caller becomes its admin"""
    return TeamCreatedResponse(team=service.create_team(current_user, team_data.name))


@router.post("/invite", response_model=TeamInviteResponse)
async def rotate_invite(
    current_user: UserRecord = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """Issue a fresh invite code for the caller's team (admin only)"""
    return service.rotate_invite(current_user)


@router.post("/join", response_model=TeamJoinResponse)
async def join_team(
    join_data: TeamJoin,
    current_user: UserRecord = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """Join a team by invite code, replacing any current membership"""
    return service.join_team(current_user, join_data.invite_code)


@router.post("/leave", response_model=OkResponse)
async def leave_team(
    current_user: UserRecord = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """Leave the caller's team"""
    service.leave_team(current_user)
    return OkResponse()


@router.patch("/update", response_model=TeamRenamedResponse)
async def rename_team(
    team_data: TeamUpdate,
    current_user: UserRecord = Depends(get_current_user),
    service: TeamService = Depends(get_team_service)
):
    """Rename the caller's team (admin only)"""
    return TeamRenamedResponse(team=service.rename_team(current_user, team_data.name))
