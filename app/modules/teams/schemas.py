from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.core.schemas import CamelModel


class TeamRecord(BaseModel):
    """Row of the teams table"""
    id: str
    name: str
    invite_code: str
    created_at: Optional[datetime] = None


class TeamCreate(CamelModel):
    name: Optional[str] = None


class TeamUpdate(CamelModel):
    name: Optional[str] = None


class TeamJoin(CamelModel):
    invite_code: Optional[str] = None


class TeamResponse(CamelModel):
    id: str
    name: str


class TeamWithInviteResponse(TeamResponse):
    invite_code: str


class TeamCreatedResponse(CamelModel):
    team: TeamWithInviteResponse


class TeamRenamedResponse(CamelModel):
    team: TeamResponse


class TeamInviteResponse(CamelModel):
    id: str
    invite_code: str


class TeamJoinResponse(CamelModel):
    ok: bool = True
    team_id: str
