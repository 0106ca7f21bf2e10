from typing import Optional, List
from datetime import date, datetime

from app.core.schemas import CamelModel
from app.modules.checks.schemas import CheckResponse


class GoalCreate(CamelModel):
    # Required fields are validated by GoalService so a missing one is a 400 with a clear message
    title: Optional[str] = None
    target_count: Optional[int] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    notes: Optional[str] = None
    month: Optional[str] = None  # YYYY-MM, defaults to the current month
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class GoalUpdate(CamelModel):
    title: Optional[str] = None
    target_count: Optional[int] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class GoalResponse(CamelModel):
    id: str
    user_id: str
    team_id: Optional[str] = None
    title: str
    target_count: int
    unit: str
    category: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[str] = None
    month: date
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None


class GoalWithChecksResponse(GoalResponse):
    checks: List[CheckResponse] = []
