from typing import Optional, Union
from datetime import date

from app.core.schemas import CamelModel


class CheckCreate(CamelModel):
    goal_id: Optional[str] = None
    date: Optional[str] = None  # YYYY-MM-DD
    value: Union[int, float] = 1


class CheckResponse(CamelModel):
    id: str
    goal_id: str
    date: date
    value: Union[int, float]
