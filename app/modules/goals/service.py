import logging
from datetime import date
from supabase import Client
from app.core.dates import parse_month
from app.core.exceptions import InvalidArgument, NotFound
from app.modules.checks.schemas import CheckResponse
from app.modules.goals.schemas import (
    GoalCreate, GoalUpdate, GoalResponse, GoalWithChecksResponse
)
from app.modules.users.schemas import UserRecord
from typing import Dict, List

logger = logging.getLogger(__name__)

# A null for these means "leave unchanged"; null for the other fields clears them
_KEEP_ON_NULL = {"title", "target_count", "unit", "start_date", "end_date"}


class GoalService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _checks_by_goal(self, goal_ids: List[str]) -> Dict[str, List[CheckResponse]]:
        grouped: Dict[str, List[CheckResponse]] = {goal_id: [] for goal_id in goal_ids}
        if not goal_ids:
            return grouped
        result = self.supabase.table("checks")\
            .select("*")\
            .in_("goal_id", goal_ids)\
            .order("date")\
            .execute()
        for row in result.data:
            grouped.setdefault(row["goal_id"], []).append(CheckResponse(**row))
        return grouped

    def list_goals(self, user_id: str, month: date) -> List[GoalWithChecksResponse]:
        """Caller's goals for a month with their checks, newest first"""
        result = self.supabase.table("goals")\
            .select("*")\
            .eq("user_id", user_id)\
            .eq("month", month.isoformat())\
            .order("created_at", desc=True)\
            .execute()
        checks = self._checks_by_goal([row["id"] for row in result.data])
        return [
            GoalWithChecksResponse(**row, checks=checks.get(row["id"], []))
            for row in result.data
        ]

    def get_owned_goal(self, user_id: str, goal_id: str) -> GoalResponse:
        """Get a goal only if the caller owns it; anything else is NotFound"""
        result = self.supabase.table("goals")\
            .select("*")\
            .eq("id", goal_id)\
            .eq("user_id", user_id)\
            .limit(1)\
            .execute()
        if not result.data:
            raise NotFound("Goal not found")
        return GoalResponse(**result.data[0])

    def create_goal(self, user: UserRecord, goal_data: GoalCreate) -> GoalResponse:
        """Create a goal for the caller, stamped with the caller's current team"""
        if not goal_data.title or not goal_data.target_count or not goal_data.unit:
            raise InvalidArgument("title, targetCount, unit are required")
        if goal_data.target_count < 0:
            raise InvalidArgument("targetCount must be positive")

        month = parse_month(goal_data.month)
        result = self.supabase.table("goals").insert({
            "user_id": user.id,
            "team_id": user.team_id,
            "title": goal_data.title,
            "target_count": goal_data.target_count,
            "unit": goal_data.unit,
            "category": goal_data.category,
            "notes": goal_data.notes,
            "month": month.isoformat(),
            "start_date": goal_data.start_date.isoformat() if goal_data.start_date else None,
            "end_date": goal_data.end_date.isoformat() if goal_data.end_date else None,
        }).execute()

        if not result.data:
            raise RuntimeError("Failed to create goal")
        goal = GoalResponse(**result.data[0])
        logger.info("User %s created goal %s for %s", user.id, goal.id, month.isoformat())
        return goal

    def update_goal(self, user_id: str, goal_id: str, goal_data: GoalUpdate) -> GoalResponse:
        """Partially update a goal owned by the caller"""
        update_data = {}
        for field, value in goal_data.model_dump(exclude_unset=True).items():
            if value is None and field in _KEEP_ON_NULL:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            update_data[field] = value

        if "target_count" in update_data and update_data["target_count"] <= 0:
            # Non-owners get NotFound before any field validation
            self.get_owned_goal(user_id, goal_id)
            raise InvalidArgument("targetCount must be positive")

        if not update_data:
            return self.get_owned_goal(user_id, goal_id)

        # Ownership is part of the filter so the check and the write are one statement
        result = self.supabase.table("goals")\
            .update(update_data)\
            .eq("id", goal_id)\
            .eq("user_id", user_id)\
            .execute()

        if not result.data:
            raise NotFound("Goal not found")
        return GoalResponse(**result.data[0])

    def delete_goal(self, user_id: str, goal_id: str) -> bool:
        """Delete a goal owned by the caller; its checks go with it. No-op otherwise."""
        result = self.supabase.table("goals")\
            .delete()\
            .eq("id", goal_id)\
            .eq("user_id", user_id)\
            .execute()
        deleted = len(result.data) > 0
        if deleted:
            logger.info("User %s deleted goal %s", user_id, goal_id)
        return deleted
