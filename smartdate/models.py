from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Meridiem(str, Enum):
    AM = 'am'
    PM = 'pm'
    NONE = ''

    @classmethod
    def from_token(cls, token: str | None) -> 'Meridiem':
        """Map a matched suffix ('am', 'a', 'pm', 'p') to a Meridiem."""
        if not token:
            return cls.NONE
        t = token.lower()
        if t in ('am', 'a'):
            return cls.AM
        if t in ('pm', 'p'):
            return cls.PM
        return cls.NONE


class DateFormat(str, Enum):
    MDY = 'mdy'
    DMY = 'dmy'

    @classmethod
    def coerce(cls, value) -> 'DateFormat':
        """Accept an enum member or a case-insensitive string; default MDY."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == 'dmy':
            return cls.DMY
        return cls.MDY


class TimeFormat(str, Enum):
    H12 = '12hr'
    H24 = '24hr'

    @classmethod
    def coerce(cls, value) -> 'TimeFormat':
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() in ('24hr', '24', '24h'):
            return cls.H24
        return cls.H12


class WeekdayKeyword(str, Enum):
    WEEKEND = 'weekend'
    WEEKDAY = 'weekday'


@dataclass(frozen=True)
class MatchSpan:
    """Half-open character range into the original input."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]

    def to_dict(self) -> dict:
        return {'start': self.start, 'end': self.end}


@dataclass(frozen=True)
class TimeMatch:
    start: int
    end: int
    hour: int
    minute: int = 0
    meridiem: Meridiem = Meridiem.NONE
    # bare numbers ('5') only count as a time next to an explicit date
    requires_date: bool = False


@dataclass(frozen=True)
class DateCandidate:
    date: datetime
    match: MatchSpan
    has_time: bool = False
    date_provided: bool = True


@dataclass(frozen=True)
class ParsedDate:
    """Public parse result.

    `date` is 'YYYY-MM-DD' when has_time is False (any time that day) and
    'YYYY-MM-DDTHH:MM:SS' otherwise.
    """
    date: str
    match: MatchSpan
    has_time: bool

    def as_datetime(self) -> datetime:
        return datetime.fromisoformat(self.date)

    def to_dict(self) -> dict:
        return {'date': self.date, 'match': self.match.to_dict(), 'has_time': self.has_time}
