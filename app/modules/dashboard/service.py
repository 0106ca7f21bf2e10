"""
Team dashboard aggregation.

Progress is computed from every check a member has ever recorded, across all
of their goals and months:

    progress   = clamp(round_half_up(100 * sum(check.value) / target_count), 0, 100)
    completion = the same over the sums of all of a member's goals

A zero target yields 0 instead of dividing by zero.
"""
import logging
import math
from supabase import Client
from app.config import settings
from app.config.permissions_config import Capability, has_capability
from app.core.dates import format_display_date
from app.core.exceptions import InvalidArgument, NotFound
from app.modules.dashboard.schemas import (
    DashboardTeam, GoalDetail, RecentCheck, MemberSummary, TeamDashboardResponse
)
from app.modules.teams.service import TeamService
from app.modules.users.schemas import UserRecord
from app.modules.users.service import UserService
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

RECENT_CHECKS_LIMIT = 3


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percent(done: float, target: float) -> int:
    """Share of target achieved as a whole percentage clamped to [0, 100]"""
    if not target or target <= 0:
        return 0
    return max(0, min(100, round_half_up(100 * done / target)))


def summarize_goal(goal: Dict[str, Any], checks: List[Dict[str, Any]]) -> GoalDetail:
    total = sum(c.get("value") or 0 for c in checks)
    return GoalDetail(
        id=goal["id"],
        title=goal["title"],
        target_count=goal["target_count"],
        unit=goal["unit"],
        progress=percent(total, goal["target_count"]),
        checks_total=total,
    )


def recent_checks(
    goals: List[Dict[str, Any]],
    checks_by_goal: Dict[str, List[Dict[str, Any]]],
    utc_offset_hours: int,
    limit: int = RECENT_CHECKS_LIMIT,
) -> List[RecentCheck]:
    """Latest checks across the goals, newest day first; same-day ties go to the higher check id"""
    tagged = [
        (check, goal["title"])
        for goal in goals
        for check in checks_by_goal.get(goal["id"], [])
    ]
    tagged.sort(key=lambda item: (str(item[0]["date"]), str(item[0]["id"])), reverse=True)
    return [
        RecentCheck(date=format_display_date(check["date"], utc_offset_hours), goal_title=title)
        for check, title in tagged[:limit]
    ]


def summarize_member(
    member: UserRecord,
    goals: List[Dict[str, Any]],
    checks_by_goal: Dict[str, List[Dict[str, Any]]],
    utc_offset_hours: int,
) -> MemberSummary:
    details = [summarize_goal(g, checks_by_goal.get(g["id"], [])) for g in goals]
    total_target = sum(g["target_count"] or 0 for g in goals)
    total_done = sum(d.checks_total for d in details)
    return MemberSummary(
        id=member.id,
        name=member.name,
        email=member.email,
        role=member.role,
        completion=percent(total_done, total_target),
        goals=len(goals),
        goals_detail=details,
        recent_checks=recent_checks(goals, checks_by_goal, utc_offset_hours),
    )


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)
        self.teams = TeamService(supabase)

    def _goals_by_user(self, user_ids: List[str]) -> Dict[str, List[Dict[str, Any]]]:
        grouped: Dict[str, List[Dict[str, Any]]] = {user_id: [] for user_id in user_ids}
        if not user_ids:
            return grouped
        result = self.supabase.table("goals")\
            .select("*")\
            .in_("user_id", user_ids)\
            .order("created_at", desc=True)\
            .execute()
        for goal in result.data:
            grouped.setdefault(goal["user_id"], []).append(goal)
        return grouped

    def _checks_by_goal(self, goal_ids: List[str]) -> Dict[str, List[Dict[str, Any]]]:
        grouped: Dict[str, List[Dict[str, Any]]] = {goal_id: [] for goal_id in goal_ids}
        if not goal_ids:
            return grouped
        result = self.supabase.table("checks")\
            .select("*")\
            .in_("goal_id", goal_ids)\
            .execute()
        for check in result.data:
            grouped.setdefault(check["goal_id"], []).append(check)
        return grouped

    def build_team_summary(self, user: UserRecord) -> TeamDashboardResponse:
        """Progress of every member of the caller's team"""
        if not user.team_id:
            raise InvalidArgument("No team joined")

        team = self.teams.get_team(user.team_id)
        if team is None:
            raise NotFound("Team not found")

        members = self.users.list_team_members(team.id)
        goals_by_user = self._goals_by_user([m.id for m in members])
        checks_by_goal = self._checks_by_goal(
            [g["id"] for goals in goals_by_user.values() for g in goals]
        )

        summaries = [
            summarize_member(
                member,
                goals_by_user.get(member.id, []),
                checks_by_goal,
                settings.display_utc_offset_hours,
            )
            for member in members
        ]

        team_fields = {"id": team.id, "name": team.name}
        if has_capability(user.role, Capability.VIEW_INVITE_CODE):
            team_fields["invite_code"] = team.invite_code
        dashboard_team = DashboardTeam(**team_fields)

        return TeamDashboardResponse(team=dashboard_team, members=summaries, me_role=user.role)
