"""
Calendar helpers shared by the goal, check and dashboard modules.
Stored dates are timezone-less calendar days; only the dashboard renders
them at a fixed civil offset.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from app.core.exceptions import InvalidArgument


def current_month_start(today: Optional[date] = None) -> date:
    """First day of the current UTC month"""
    today = today or datetime.now(timezone.utc).date()
    return today.replace(day=1)


def parse_month(value: Optional[str]) -> date:
    """
    Parse a "YYYY-MM" month (or a full "YYYY-MM-DD") into its first day.

    None or an empty string means the current month.

    Raises:
        InvalidArgument: the value is not a month
    """
    if not value:
        return current_month_start()
    text = value.strip()
    try:
        if len(text) == 7:
            return datetime.strptime(text, "%Y-%m").date()
        return date.fromisoformat(text).replace(day=1)
    except ValueError:
        raise InvalidArgument("month must be YYYY-MM")


def parse_day(value: Optional[str], field: str = "date") -> date:
    """Parse a "YYYY-MM-DD" calendar day (a datetime is truncated to its date)"""
    if not value:
        raise InvalidArgument(f"{field} is required")
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise InvalidArgument(f"{field} must be YYYY-MM-DD")


def format_display_date(value: Union[date, datetime, str], utc_offset_hours: int) -> str:
    """
    Render a stored day as YYYY-MM-DD in a fixed civil offset.

    Plain dates are taken as midnight UTC, which is how they are stored.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value) if "T" in value else date.fromisoformat(value)
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    local = moment.astimezone(timezone(timedelta(hours=utc_offset_hours)))
    return local.date().isoformat()
