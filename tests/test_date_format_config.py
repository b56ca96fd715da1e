from datetime import datetime

import pytest

from smartdate.matcher import parse_smart_date


NOW = datetime(2025, 12, 7, 12, 0, 0)


@pytest.mark.parametrize('order,expected', [
    ('dmy', '2026-12-01'),  # 1 Dec 2026
    ('mdy', '2026-01-12'),  # Jan 12 2026
    ('DMY', '2026-12-01'),
])
def test_date_format_respected(restore_config, order, expected):
    # modify config at runtime; parse_smart_date reads it on every call
    restore_config.DATE_FORMAT = order
    res = parse_smart_date('Follow up 1-12-2026', NOW)
    assert res, 'expected a date'
    assert res.date == expected


def test_explicit_date_format_overrides_config(restore_config):
    restore_config.DATE_FORMAT = 'dmy'
    res = parse_smart_date('Follow up 1-12-2026', NOW, 'mdy')
    assert res.date == '2026-01-12'
