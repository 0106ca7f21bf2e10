from typing import Optional, List, Union

from app.config.permissions_config import Role
from app.core.schemas import CamelModel


class DashboardTeam(CamelModel):
    id: str
    name: str
    invite_code: Optional[str] = None  # left unset (omitted) unless the caller may see it


class GoalDetail(CamelModel):
    id: str
    title: str
    target_count: int
    unit: str
    progress: int
    checks_total: Union[int, float]


class RecentCheck(CamelModel):
    date: str  # YYYY-MM-DD at the display offset
    goal_title: str


class MemberSummary(CamelModel):
    id: str
    name: Optional[str] = None
    email: str
    role: Role
    completion: int
    goals: int
    goals_detail: List[GoalDetail]
    recent_checks: List[RecentCheck]


class TeamDashboardResponse(CamelModel):
    team: DashboardTeam
    members: List[MemberSummary]
    me_role: Role
