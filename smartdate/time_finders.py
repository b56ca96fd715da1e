"""Time-of-day finders and date/time bridging.

Times are collected into a flat list first; a date candidate is then paired
with the closest time it can reach across a short bridge ('dec 12 at 7',
'10pm on dec 12', 'tomorrow 9am').
"""
from datetime import datetime
import logging

from .constants import (
    BARE_HOUR_RE,
    TIME_24H_RE,
    TIME_AMPM_RE,
    TIME_SPELLED_RE,
    WORD_NUMBERS,
)
from .models import DateCandidate, MatchSpan, Meridiem, TimeMatch
from .utils import add_days, apply_time, start_of_day

logger = logging.getLogger(__name__)

MAX_BRIDGE_LENGTH = 4


def find_time_with_ampm(lower: str) -> list[TimeMatch]:
    """'3pm', '10:30 am', '2:15p'."""
    out: list[TimeMatch] = []
    for m in TIME_AMPM_RE.finditer(lower):
        hour = int(m.group(1))
        minute = int(m.group(2)) if m.group(2) else 0
        if hour > 24 or minute > 59:
            continue
        out.append(TimeMatch(m.start(), m.end(), hour, minute, Meridiem.from_token(m.group(3))))
    return out


def find_spelled_time(lower: str) -> list[TimeMatch]:
    """'ten pm', 'seven am'."""
    return [
        TimeMatch(m.start(), m.end(), WORD_NUMBERS[m.group(1)], 0, Meridiem.from_token(m.group(2)))
        for m in TIME_SPELLED_RE.finditer(lower)
    ]


def find_time_24h(lower: str) -> list[TimeMatch]:
    """'14:30', '09:00'."""
    return [
        TimeMatch(m.start(), m.end(), int(m.group(1)), int(m.group(2)))
        for m in TIME_24H_RE.finditer(lower)
    ]


def find_bare_hours(lower: str) -> list[TimeMatch]:
    """'5', '14': only usable right next to an explicit date."""
    out: list[TimeMatch] = []
    for m in BARE_HOUR_RE.finditer(lower):
        hour = int(m.group(1))
        if hour > 23:
            continue
        out.append(TimeMatch(m.start(), m.end(), hour, 0, Meridiem.NONE, requires_date=True))
    return out


def collect_time_matches(lower: str) -> list[TimeMatch]:
    # order matters: on equal positions the earlier finder wins
    return (
        find_time_with_ampm(lower)
        + find_spelled_time(lower)
        + find_time_24h(lower)
        + find_bare_hours(lower)
    )


def is_bridgeable(segment: str | None) -> bool:
    """A bridge is short whitespace with at most one connector word:
    ' ', ' at ', ', ', ' on '."""
    if not segment:
        return False
    if len(segment) > MAX_BRIDGE_LENGTH:
        return False
    if not any(ch.isspace() for ch in segment):
        return False
    return len(segment.split()) <= 1


def find_adjacent_time(candidate: DateCandidate, times: list[TimeMatch], lower: str) -> TimeMatch | None:
    """Closest time after the candidate, else closest usable time before it."""
    best_after: TimeMatch | None = None
    for t in times:
        if t.start < candidate.match.end:
            continue
        if not is_bridgeable(lower[candidate.match.end:t.start]):
            continue
        if best_after is None or t.start < best_after.start:
            best_after = t
    if best_after is not None:
        return best_after

    best_before: TimeMatch | None = None
    for t in times:
        if t.end > candidate.match.start:
            continue
        # '5 dec 12' reads as a day, not an hour
        if t.requires_date:
            continue
        if not is_bridgeable(lower[t.end:candidate.match.start]):
            continue
        if best_before is None or t.end > best_before.end:
            best_before = t
    return best_before


def combine_date_and_time(candidate: DateCandidate, time: TimeMatch, now: datetime) -> DateCandidate:
    when = apply_time(candidate.date, time.hour, time.minute, time.meridiem)
    if not candidate.date_provided and when < now:
        when = add_days(when, 1)
    return DateCandidate(
        date=when,
        match=MatchSpan(min(candidate.match.start, time.start), max(candidate.match.end, time.end)),
        has_time=True,
        date_provided=True,
    )


def attach_times(candidates: list[DateCandidate], times: list[TimeMatch], lower: str,
                 now: datetime) -> list[DateCandidate]:
    """Pair every explicit date candidate with its adjacent time, if any."""
    out: list[DateCandidate] = []
    for c in candidates:
        if not c.date_provided:
            out.append(c)
            continue
        t = find_adjacent_time(c, times, lower)
        if t is None:
            out.append(c)
            continue
        out.append(combine_date_and_time(c, t, now))
    return out


def time_only_candidates(times: list[TimeMatch], now: datetime) -> list[DateCandidate]:
    """Times with no date: today at that time, or tomorrow once it has passed."""
    today = start_of_day(now)
    out: list[DateCandidate] = []
    for t in times:
        if t.requires_date:
            continue
        when = apply_time(today, t.hour, t.minute, t.meridiem)
        if when < now:
            when = add_days(when, 1)
        out.append(DateCandidate(date=when, match=MatchSpan(t.start, t.end), has_time=True, date_provided=False))
    return out
