"""Lexical tables for the smart date matcher.

Month names, weekday names, relative-day keywords and the regex fragments
built from them. Adding a synonym only requires touching the table.
"""
import re

from .models import WeekdayKeyword

MONTHS: dict[str, int] = {
    'january': 0, 'jan': 0,
    'february': 1, 'feb': 1,
    'march': 2, 'mar': 2,
    'april': 3, 'apr': 3,
    'may': 4,
    'june': 5, 'jun': 5,
    'july': 6, 'jul': 6,
    'august': 7, 'aug': 7,
    'september': 8, 'sep': 8, 'sept': 8,
    'october': 9, 'oct': 9,
    'november': 10, 'nov': 10,
    'december': 11, 'dec': 11,
}

# Sunday=0. The pseudo tokens 'weekend' and 'weekday' map to a keyword enum
# rather than an index and are resolved separately.
WEEKDAYS: dict[str, int | WeekdayKeyword] = {
    'sunday': 0, 'sun': 0,
    'monday': 1, 'mon': 1,
    'tuesday': 2, 'tue': 2, 'tues': 2,
    'wednesday': 3, 'wed': 3,
    'thursday': 4, 'thu': 4, 'thur': 4, 'thurs': 4,
    'friday': 5, 'fri': 5,
    'saturday': 6, 'sat': 6,
    'weekend': WeekdayKeyword.WEEKEND,
    'weekday': WeekdayKeyword.WEEKDAY,
}

RELATIVE_DAYS: dict[str, int] = {
    'today': 0,
    'tomorrow': 1,
    'tmrw': 1,
    'tmr': 1,
    'yesterday': -1,
}

# Spelled-out hours accepted in front of a meridiem ('ten pm').
WORD_NUMBERS: dict[str, int] = {
    'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5, 'six': 6,
    'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10, 'eleven': 11, 'twelve': 12,
}

# Labels used by the relative formatter (en-US short forms).
WEEKDAY_ABBREVIATIONS = ['sun', 'mon', 'tue', 'wed', 'thu', 'fri', 'sat']
MONTH_ABBREVIATIONS = ['jan', 'feb', 'mar', 'apr', 'may', 'jun',
                       'jul', 'aug', 'sep', 'oct', 'nov', 'dec']

WEEKDAY_MODIFIERS = ('next', 'first')


def _alternation(words) -> str:
    # longest first so a short abbreviation never shadows its full form
    return '|'.join(re.escape(w) for w in sorted(words, key=len, reverse=True))


MONTH_NAME_PATTERN = _alternation(MONTHS)
WEEKDAY_PATTERN = _alternation(WEEKDAYS)
WORD_NUMBER_PATTERN = _alternation(WORD_NUMBERS)
DAY_TOKEN_PATTERN = r'(\d{1,2}(?:st|nd|rd|th)?|first)'
# a two-digit number followed by a meridiem is an hour ('dec 12 10 pm')
YEAR_TOKEN_PATTERN = r'(\d{3,4}|\d{2}(?!\s*(?:am|pm|a|p)\b))'
YEAR_SEPARATOR = r'(?:\s*,\s*|\s+)'
TRAILING_BOUNDARY = r'(?=[\s,.;!?)\-]|$)'
MERIDIEM_PATTERN = r'(am|pm|a|p)'

MONTH_FIRST_RE = re.compile(
    rf'\b({MONTH_NAME_PATTERN})\b(?:\s+{DAY_TOKEN_PATTERN})?'
    rf'(?:{YEAR_SEPARATOR}{YEAR_TOKEN_PATTERN})?{TRAILING_BOUNDARY}'
)
DAY_FIRST_RE = re.compile(
    rf'\b{DAY_TOKEN_PATTERN}\s+({MONTH_NAME_PATTERN})\b'
    rf'(?:{YEAR_SEPARATOR}{YEAR_TOKEN_PATTERN})?{TRAILING_BOUNDARY}'
)
WEEKDAY_RE = re.compile(
    rf'\b(?:({"|".join(WEEKDAY_MODIFIERS)})\s+)?({WEEKDAY_PATTERN})\b'
)
RELATIVE_DAY_RE = re.compile(rf'\b({_alternation(RELATIVE_DAYS)})\b')
NUMERIC_DATE_RE = re.compile(
    rf'\b(\d{{1,2}})[/-](\d{{1,2}})(?:[/-](\d{{2,4}}))?{TRAILING_BOUNDARY}'
)
ORDINAL_RE = re.compile(r'\b(\d{1,2}(?:st|nd|rd|th))\b')

TIME_AMPM_RE = re.compile(rf'\b(\d{{1,2}})(?::(\d{{2}}))?\s*{MERIDIEM_PATTERN}\b')
TIME_SPELLED_RE = re.compile(rf'\b({WORD_NUMBER_PATTERN})\s*(am|pm)\b')
TIME_24H_RE = re.compile(r'\b([01]?\d|2[0-3]):([0-5]\d)\b')
BARE_HOUR_RE = re.compile(r'\b([0-2]?\d)\b')
