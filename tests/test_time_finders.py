import pytest
from datetime import datetime

from smartdate.models import DateCandidate, MatchSpan, Meridiem, TimeMatch
from smartdate.time_finders import (
    attach_times,
    collect_time_matches,
    combine_date_and_time,
    find_adjacent_time,
    find_bare_hours,
    find_spelled_time,
    find_time_24h,
    find_time_with_ampm,
    is_bridgeable,
    time_only_candidates,
)


NOW = datetime(2025, 12, 7, 12, 0, 0)


def test_ampm_variants():
    found = find_time_with_ampm('3pm 10:30 am 2:15p 7 a')
    assert [(t.hour, t.minute, t.meridiem) for t in found] == [
        (3, 0, Meridiem.PM),
        (10, 30, Meridiem.AM),
        (2, 15, Meridiem.PM),
        (7, 0, Meridiem.AM),
    ]


def test_ampm_rejects_overrun():
    assert find_time_with_ampm('25pm 10:75am') == []


def test_spelled_time():
    found = find_spelled_time('at twelve pm')
    assert len(found) == 1
    assert (found[0].hour, found[0].meridiem) == (12, Meridiem.PM)
    assert find_spelled_time('someone pm') == []


def test_24h_time():
    found = find_time_24h('09:05 and 23:59 but not 24:00')
    assert [(t.hour, t.minute) for t in found] == [(9, 5), (23, 59)]
    assert all(t.meridiem == Meridiem.NONE for t in found)


def test_bare_hours_require_date():
    found = find_bare_hours('at 5 or 23 or 24 or 2026')
    assert [t.hour for t in found] == [5, 23]
    assert all(t.requires_date for t in found)


def test_collect_orders_specific_finders_first():
    found = collect_time_matches('14:30')
    assert found[0].minute == 30
    assert found[-1].requires_date


@pytest.mark.parametrize('segment,expected', [
    (' ', True),
    (' at ', True),
    (', ', True),
    (' on ', True),
    ('', False),
    (None, False),
    (',', False),
    (' .... ', False),
    (' at the ', False),
])
def test_is_bridgeable(segment, expected):
    assert is_bridgeable(segment) is expected


def _date(start, end, provided=True, when=datetime(2025, 12, 12)):
    return DateCandidate(date=when, match=MatchSpan(start, end), has_time=False, date_provided=provided)


def test_adjacent_prefers_time_after():
    text = '9am dec 12 10pm'
    cand = _date(4, 10)
    times = collect_time_matches(text)
    t = find_adjacent_time(cand, times, text)
    assert text[t.start:t.end] == '10pm'


def test_adjacent_falls_back_to_time_before():
    text = '9am dec 12'
    t = find_adjacent_time(_date(4, 10), collect_time_matches(text), text)
    assert text[t.start:t.end] == '9am'


def test_adjacent_skips_bare_hour_before_date():
    text = '5 dec 12'
    assert find_adjacent_time(_date(2, 8), collect_time_matches(text), text) is None


def test_combine_builds_merged_span():
    time = TimeMatch(11, 15, 10, 0, Meridiem.PM)
    combined = combine_date_and_time(_date(4, 10), time, NOW)
    assert combined.match == MatchSpan(4, 15)
    assert combined.date == datetime(2025, 12, 12, 22, 0)
    assert combined.has_time and combined.date_provided


def test_combine_bumps_inferred_date_when_past():
    time = TimeMatch(0, 3, 9, 0, Meridiem.AM)
    combined = combine_date_and_time(_date(0, 0, provided=False, when=datetime(2025, 12, 7)), time, NOW)
    assert combined.date == datetime(2025, 12, 8, 9, 0)


def test_combine_keeps_explicit_past_date():
    time = TimeMatch(0, 3, 9, 0, Meridiem.AM)
    combined = combine_date_and_time(_date(0, 0, when=datetime(2025, 12, 7)), time, NOW)
    assert combined.date == datetime(2025, 12, 7, 9, 0)


def test_attach_times_leaves_unpaired_candidates():
    text = 'dec 12 something 10pm'
    cand = _date(0, 6)
    out = attach_times([cand], collect_time_matches(text), text, NOW)
    assert out == [cand]


def test_time_only_candidates():
    text = 'at 9am or 6pm or 7'
    out = time_only_candidates(collect_time_matches(text), NOW)
    assert [c.date for c in out] == [datetime(2025, 12, 8, 9, 0), datetime(2025, 12, 7, 18, 0)]
    assert all(c.has_time and not c.date_provided for c in out)


def test_attach_times_ignores_bare_hour_before_date():
    text = '5 dec 12'
    cand = _date(2, 8)
    assert attach_times([cand], collect_time_matches(text), text, NOW) == [cand]
