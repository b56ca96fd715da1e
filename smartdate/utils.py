"""Pure calendar helpers for the smart date matcher.

Everything here works on naive local wall-clock datetimes and returns new
values; nothing mutates its arguments.
"""
from datetime import date, datetime, timedelta
import logging

from dateutil.relativedelta import relativedelta, MO, TU, WE, TH, FR, SA, SU

from .models import Meridiem

logger = logging.getLogger(__name__)

# dateutil weekday objects indexed Sunday=0 to match the lexical tables
_RELATIVEDELTA_WEEKDAYS = [SU, MO, TU, WE, TH, FR, SA]


def now_local() -> datetime:
    """Return the current naive local wall-clock time, second precision."""
    return datetime.now().replace(microsecond=0)


def to_wall_clock(value: datetime | date | None) -> datetime:
    """Normalize a reference time to a naive wall-clock datetime.

    - None means "now".
    - A date becomes midnight of that day.
    - An aware datetime keeps its wall-clock fields and drops tzinfo.
    """
    if value is None:
        return now_local()
    if isinstance(value, datetime):
        return value.replace(tzinfo=None, microsecond=0)
    return datetime(value.year, value.month, value.day)


def fold_case(text: str) -> str:
    """Lowercase text without changing its length.

    Characters whose lowercase form is longer ('İ' -> 'i̇') are kept as-is so
    offsets found in the result still index the original string.
    """
    out = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return ''.join(out)


def day_of_week(d: datetime) -> int:
    """Day of week with Sunday=0 (Python's weekday() has Monday=0)."""
    return (d.weekday() + 1) % 7


def start_of_day(d: datetime) -> datetime:
    return d.replace(hour=0, minute=0, second=0, microsecond=0)


def add_days(d: datetime, days: int) -> datetime:
    return d + timedelta(days=days)


def normalize_year(year: int | None, now_year: int) -> int:
    """Two-digit years mean 20YY; a missing year means the current one."""
    if year is None:
        return now_year
    if year < 100:
        return 2000 + year
    return year


def next_weekday(base: datetime, target_dow: int, is_next: bool = False) -> datetime:
    """Next occurrence of target_dow (Sunday=0) on or after base.

    With is_next ('next monday') the immediate occurrence is skipped, so the
    result is always at least a week out.
    """
    offset = (target_dow - day_of_week(base)) % 7
    if is_next:
        offset += 7
    return add_days(base, offset)


def next_weekend(base: datetime) -> datetime:
    """Upcoming Saturday, or Sunday when base is already a Saturday."""
    dow = day_of_week(base)
    if dow == 6:
        return add_days(base, 1)
    return add_days(base, (6 - dow) % 7 or 7)


def next_workday(base: datetime, is_next: bool = False) -> datetime:
    dow = day_of_week(base)
    if dow == 0:
        return add_days(base, 1)
    if dow == 6:
        return add_days(base, 2)
    return add_days(base, 1) if is_next else base


def first_of_next_month(base: datetime) -> datetime:
    return start_of_day(base).replace(day=1) + relativedelta(months=1)


def first_weekday_of_next_month(base: datetime, target_dow: int) -> datetime:
    """First occurrence of target_dow (Sunday=0) in the month after base."""
    return first_of_next_month(base) + relativedelta(weekday=_RELATIVEDELTA_WEEKDAYS[target_dow](+1))


def first_workday_of_next_month(base: datetime) -> datetime:
    first = first_of_next_month(base)
    if day_of_week(first) in (0, 6):
        return first + relativedelta(weekday=MO(+1))
    return first


def parse_day_number(raw: str | None) -> int | None:
    """Parse '5', '05' or '5th' into a day of month; None when out of 1..31."""
    if not raw:
        return None
    cleaned = raw.lower()
    for suffix in ('st', 'nd', 'rd', 'th'):
        if cleaned.endswith(suffix):
            cleaned = cleaned[:-len(suffix)]
            break
    try:
        num = int(cleaned)
    except ValueError:
        return None
    if num < 1 or num > 31:
        return None
    return num


def resolve_day_token(token: str | None) -> int | None:
    if not token:
        return None
    if token == 'first':
        return 1
    return parse_day_number(token)


# longest run of years without a Feb 29 (e.g. 2097..2103)
_LEAP_SEARCH_YEARS = 9


def next_existing_date(year: int, month: int, day: int) -> datetime:
    """Midnight of month/day in the first year >= year where it exists.

    Only Feb 29 ever needs more than one try. Raises ValueError for days no
    year has (feb 30, apr 31).
    """
    for y in range(year, year + _LEAP_SEARCH_YEARS):
        try:
            return datetime(y, month, day)
        except ValueError:
            continue
    raise ValueError(f'no such calendar day: {month}/{day}')


def clamp_future(d: datetime, now: datetime) -> datetime:
    """Roll a yearless date forward to its next occurrence when it falls before today.

    Feb 29 rolls to the next leap year.
    """
    if d >= start_of_day(now):
        return d
    return next_existing_date(d.year + 1, d.month, d.day)


def build_date(month: int, day: int | None, year: int | None, now: datetime) -> datetime:
    """Build midnight of month (0-based)/day/year.

    Without an explicit year the next occurrence on or after today is used.
    Raises ValueError for dates that do not exist (e.g. feb 30, or feb 29 in
    an explicit non-leap year).
    """
    if year is not None:
        return datetime(normalize_year(year, now.year), month + 1, day or 1)
    candidate = next_existing_date(now.year, month + 1, day or 1)
    return clamp_future(candidate, now)


def apply_time(d: datetime, hour: int, minute: int | None, meridiem: Meridiem = Meridiem.NONE) -> datetime:
    """Return d at the given time of day.

    12am is midnight, Npm for N < 12 is N+12. Without a meridiem the hour is
    used as given, so a bare 12 stays noon. An hour of 24 (tolerated by the
    am/pm finder) lands on midnight of the following day.
    """
    h = hour
    if meridiem == Meridiem.AM:
        if h == 12:
            h = 0
    elif meridiem == Meridiem.PM:
        if h < 12:
            h += 12
    base = start_of_day(d)
    return base + timedelta(hours=h, minutes=minute or 0)
