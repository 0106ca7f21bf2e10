from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from app.config.permissions_config import Role
from app.core.schemas import CamelModel


class UserRecord(BaseModel):
    """Row of the users table"""
    id: str
    auth_user_id: str
    email: str = ""
    name: Optional[str] = None
    role: Role = Role.MEMBER
    team_id: Optional[str] = None
    created_at: Optional[datetime] = None


class MeResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    role: Role
    team_id: Optional[str] = None
    capabilities: List[str]
