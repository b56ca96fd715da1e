"""Date candidate finders.

Each finder scans the lowercased input on its own and returns every match it
recognizes as a DateCandidate. Finders may overlap; picking a winner is the
scorer's job.
"""
from datetime import datetime
import logging

from .constants import (
    DAY_FIRST_RE,
    MONTH_FIRST_RE,
    MONTHS,
    NUMERIC_DATE_RE,
    ORDINAL_RE,
    RELATIVE_DAYS,
    RELATIVE_DAY_RE,
    WEEKDAYS,
    WEEKDAY_RE,
)
from .models import DateCandidate, DateFormat, MatchSpan, WeekdayKeyword
from .utils import (
    add_days,
    build_date,
    first_of_next_month,
    first_weekday_of_next_month,
    first_workday_of_next_month,
    next_weekday,
    next_weekend,
    next_workday,
    parse_day_number,
    resolve_day_token,
    start_of_day,
)

logger = logging.getLogger(__name__)


def _candidate(m, date: datetime) -> DateCandidate:
    return DateCandidate(date=date, match=MatchSpan(m.start(), m.end()), has_time=False, date_provided=True)


def find_relative_dates(lower: str, now: datetime) -> list[DateCandidate]:
    """'today', 'tomorrow', 'tmrw', 'tmr', 'yesterday'."""
    today = start_of_day(now)
    return [_candidate(m, add_days(today, RELATIVE_DAYS[m.group(1)]))
            for m in RELATIVE_DAY_RE.finditer(lower)]


def resolve_weekend(base: datetime, modifier: str | None) -> datetime:
    if modifier == 'first':
        return first_weekday_of_next_month(base, 6)
    weekend = next_weekend(base)
    return add_days(weekend, 7) if modifier == 'next' else weekend


def resolve_workday(base: datetime, modifier: str | None) -> datetime:
    if modifier == 'first':
        return first_workday_of_next_month(base)
    return next_workday(base, modifier == 'next')


def find_weekdays(lower: str, now: datetime) -> list[DateCandidate]:
    """Weekday names with an optional 'next' or 'first' modifier.

    'weekend' and 'weekday' are pseudo weekdays with their own rules.
    """
    out: list[DateCandidate] = []
    base = start_of_day(now)
    for m in WEEKDAY_RE.finditer(lower):
        modifier, word = m.group(1), m.group(2)
        target = WEEKDAYS.get(word)
        if target is None:
            continue
        if target == WeekdayKeyword.WEEKEND:
            date = resolve_weekend(base, modifier)
        elif target == WeekdayKeyword.WEEKDAY:
            date = resolve_workday(base, modifier)
        elif modifier == 'first':
            date = first_weekday_of_next_month(base, target)
        else:
            date = next_weekday(base, target, modifier == 'next')
        out.append(_candidate(m, date))
    return out


def _month_candidate(m, month_word: str, day_token: str | None, year_token: str | None,
                     now: datetime) -> DateCandidate | None:
    month = MONTHS.get(month_word)
    if month is None:
        return None
    day = resolve_day_token(day_token) if day_token else 1
    if not day:
        return None
    year = int(year_token) if year_token else None
    try:
        date = build_date(month, day, year, now)
    except ValueError:
        # e.g. 'feb 30'
        return None
    return _candidate(m, date)


def find_month_dates(lower: str, now: datetime) -> list[DateCandidate]:
    """'dec 12', 'december 1st, 2026', 'jan', '1 dec', '1 dec 2026'."""
    out: list[DateCandidate] = []
    for m in MONTH_FIRST_RE.finditer(lower):
        month_word, day_token, year_token = m.groups()
        c = _month_candidate(m, month_word, day_token, year_token, now)
        if c is not None:
            out.append(c)
    for m in DAY_FIRST_RE.finditer(lower):
        day_token, month_word, year_token = m.groups()
        c = _month_candidate(m, month_word, day_token, year_token, now)
        if c is not None:
            out.append(c)
    return out


def find_numeric_dates(lower: str, now: datetime, date_format: DateFormat = DateFormat.MDY) -> list[DateCandidate]:
    """'12/15', '12-15-25', '1-12-2026'; ordering follows date_format."""
    out: list[DateCandidate] = []
    for m in NUMERIC_DATE_RE.finditer(lower):
        part1, part2 = int(m.group(1)), int(m.group(2))
        if date_format == DateFormat.DMY:
            day, month = part1, part2 - 1
        else:
            month, day = part1 - 1, part2
        if month < 0 or month > 11 or day < 1 or day > 31:
            continue
        year = int(m.group(3)) if m.group(3) else None
        try:
            date = build_date(month, day, year, now)
        except ValueError:
            continue
        out.append(_candidate(m, date))
    return out


def find_ordinals_only(lower: str, now: datetime) -> list[DateCandidate]:
    """A bare ordinal ('5th') is that day this month, or next month once the
    day has arrived."""
    out: list[DateCandidate] = []
    base = start_of_day(now)
    for m in ORDINAL_RE.finditer(lower):
        day = parse_day_number(m.group(1))
        if not day:
            continue
        month_start = first_of_next_month(base) if day <= base.day else base.replace(day=1)
        try:
            date = month_start.replace(day=day)
        except ValueError:
            # '31st' in a month without one
            continue
        out.append(_candidate(m, date))
    return out


def find_all_dates(lower: str, now: datetime, date_format: DateFormat = DateFormat.MDY) -> list[DateCandidate]:
    return (
        find_relative_dates(lower, now)
        + find_weekdays(lower, now)
        + find_month_dates(lower, now)
        + find_numeric_dates(lower, now, date_format)
        + find_ordinals_only(lower, now)
    )
