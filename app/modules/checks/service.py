import logging
from datetime import date
from typing import Union
from supabase import Client
from app.modules.checks.schemas import CheckResponse
from app.modules.goals.service import GoalService

logger = logging.getLogger(__name__)


class CheckService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.goals = GoalService(supabase)

    def record_check(self, user_id: str, goal_id: str, day: date, value: Union[int, float] = 1) -> CheckResponse:
        """
        Record a day's progress on a goal the caller owns.

        Upserts on (goal_id, date): an existing row for that day gets its
        value replaced, not incremented.

        Raises:
            NotFound: the caller does not own the goal
        """
        self.goals.get_owned_goal(user_id, goal_id)

        result = self.supabase.table("checks").upsert(
            {"goal_id": goal_id, "date": day.isoformat(), "value": value},
            on_conflict="goal_id,date",
        ).execute()

        if not result.data:
            raise RuntimeError("Failed to record check")
        return CheckResponse(**result.data[0])

    def delete_check(self, user_id: str, goal_id: str, day: date) -> int:
        """Remove the caller's check for a day; succeeds when there is none"""
        self.goals.get_owned_goal(user_id, goal_id)

        result = self.supabase.table("checks")\
            .delete()\
            .eq("goal_id", goal_id)\
            .eq("date", day.isoformat())\
            .execute()
        return len(result.data)
