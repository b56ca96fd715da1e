"""Relative due-date labels: 'yesterday', 'today', 'tmrw', 'fri', 'dec 14'."""
from datetime import date, datetime
import logging

from .constants import MONTH_ABBREVIATIONS, WEEKDAY_ABBREVIATIONS
from .models import TimeFormat
from .utils import day_of_week, to_wall_clock

logger = logging.getLogger(__name__)


def _coerce_date(value) -> datetime | None:
    """Accept a datetime, a date or an ISO string as produced by parse_smart_date."""
    if value is None:
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
        return to_wall_clock(datetime.fromisoformat(value.strip()))
    return to_wall_clock(value)


def format_time(d: datetime, time_format: TimeFormat) -> str:
    """'2:30 pm' / '12:00 am' for 12hr, '14:30' / '0:05' for 24hr."""
    if time_format == TimeFormat.H24:
        return f'{d.hour}:{d.minute:02d}'
    hour12 = d.hour % 12 or 12
    suffix = 'am' if d.hour < 12 else 'pm'
    return f'{hour12}:{d.minute:02d} {suffix}'


def format_relative_date(value: datetime | date | str | None, has_time: bool,
                         time_format: TimeFormat | str | None = None,
                         now: datetime | date | None = None) -> str:
    """Format a due date relative to now.

    -1 day is 'yesterday', 0 'today', +1 'tmrw', +2..+6 the weekday
    abbreviation, anything else 'mon dd'. When has_time is set the clock time
    is appended in the requested format. A None date formats as ''.

    Raises ValueError for a string that is not an ISO date.
    """
    due = _coerce_date(value)
    if due is None:
        return ''
    if time_format is None:
        from . import config
        time_format = getattr(config, 'TIME_FORMAT', '12hr')
    fmt = TimeFormat.coerce(time_format)
    today = to_wall_clock(now).date()

    diff_days = (due.date() - today).days
    if diff_days == -1:
        label = 'yesterday'
    elif diff_days == 0:
        label = 'today'
    elif diff_days == 1:
        label = 'tmrw'
    elif 1 < diff_days < 7:
        label = WEEKDAY_ABBREVIATIONS[day_of_week(due)]
    else:
        label = f'{MONTH_ABBREVIATIONS[due.month - 1]} {due.day}'

    if has_time:
        label = f'{label} {format_time(due, fmt)}'
    return label
