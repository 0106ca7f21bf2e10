from fastapi import APIRouter, Depends
from app.config.permissions_config import capabilities_for
from app.core.dependencies import get_current_user
from app.modules.users.schemas import MeResponse, UserRecord

router = APIRouter(prefix="/me", tags=["users"])


@router.get("", response_model=MeResponse)
async def get_me(current_user: UserRecord = Depends(get_current_user)):
    """Current application user with team membership and role capabilities"""
    return MeResponse(
        id=current_user.id,
        email=current_user.email,
        name=current_user.name,
        role=current_user.role,
        team_id=current_user.team_id,
        capabilities=capabilities_for(current_user.role),
    )
