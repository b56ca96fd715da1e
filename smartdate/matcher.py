"""Smart date matcher: public entry points.

parse_smart_date finds the best date/time expression in freeform task text
and returns its span plus a normalized due string; strip_date_match removes
that span again to leave clean task content.
"""
from datetime import date, datetime
import logging
import re

from .date_finders import find_all_dates
from .models import DateCandidate, DateFormat, MatchSpan, ParsedDate
from .scorer import select_best
from .time_finders import attach_times, collect_time_matches, time_only_candidates
from .utils import fold_case, to_wall_clock

logger = logging.getLogger(__name__)


def _resolve_date_format(date_format) -> DateFormat:
    if date_format is None:
        # read at call time so runtime changes to config are honoured
        from . import config
        date_format = getattr(config, 'DATE_FORMAT', 'mdy')
    return DateFormat.coerce(date_format)


def parse_smart_date(text: str | None, now: datetime | date | None = None,
                     date_format: DateFormat | str | None = None) -> ParsedDate | None:
    """Parse the most specific date/time expression out of text.

    Returns None for blank input or when nothing looks like a date. The
    result is deterministic for a given (text, now, date_format).
    """
    if not text or not text.strip():
        return None
    ref = to_wall_clock(now)
    fmt = _resolve_date_format(date_format)
    lower = fold_case(text)

    dates = find_all_dates(lower, ref, fmt)
    times = collect_time_matches(lower)
    candidates = attach_times(dates, times, lower, ref) + time_only_candidates(times, ref)

    best = select_best(candidates)
    if best is None:
        logger.debug('parse_smart_date: no candidates in %r', text)
        return None
    logger.debug('parse_smart_date: %d candidates, chose %r (%s)',
                 len(candidates), best.match.slice(text), best.date.isoformat())
    return candidate_to_result(best)


def strip_date_match(text: str | None, match: MatchSpan | None) -> str:
    """Remove the matched span from text and tidy the leftovers.

    Collapses whitespace runs, drops spaces before commas and any stray
    leading comma, then trims.
    """
    if not text:
        return ''
    if match is None:
        return text.strip()
    cleaned = f'{text[:match.start]} {text[match.end:]}'
    cleaned = re.sub(r'\s+', ' ', cleaned)
    cleaned = re.sub(r'\s+,', ',', cleaned)
    cleaned = re.sub(r'^[\s,]+', '', cleaned)
    return cleaned.strip()


def format_task_due(d: datetime | None, has_time: bool) -> str | None:
    """'YYYY-MM-DD' for all-day dates, 'YYYY-MM-DDTHH:MM:SS' otherwise."""
    if d is None:
        return None
    if not has_time:
        return d.strftime('%Y-%m-%d')
    return d.strftime('%Y-%m-%dT%H:%M:%S')


def candidate_to_result(candidate: DateCandidate) -> ParsedDate:
    return ParsedDate(date=format_task_due(candidate.date, candidate.has_time),
                      match=candidate.match, has_time=candidate.has_time)
