import re
import typing
from dataclasses import dataclass, field

MAX_HOURS = 23
MAX_MINUTES = 59
MAX_CONTENT_LENGTH = 30

_leading_int = re.compile(r'^\s*([+-]?\d+)')


def parse_int(text: str) -> int:
    """Leading integer of ``text``, 0 when there is none (``'1h'`` -> 1, ``'abc'`` -> 0)."""
    match = _leading_int.match(text or '')
    return int(match.group(1)) if match else 0


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class StudyEntry:
    hours: int
    minutes: int
    content: str = ''

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def to_dict(self) -> dict:
        return {'hours': self.hours, 'minutes': self.minutes, 'content': self.content}

    @classmethod
    def from_dict(cls, data: typing.Mapping):
        return cls(int(data['hours']), int(data['minutes']), data.get('content') or '')

    @classmethod
    def from_form(cls, hours_text: str, minutes_text: str, content_text: str = ''):
        if not (hours_text or minutes_text):
            raise ValueError('provide hours or minutes')
        return cls(clamp(parse_int(hours_text), 0, MAX_HOURS),
                   clamp(parse_int(minutes_text), 0, MAX_MINUTES),
                   (content_text or '').strip()[:MAX_CONTENT_LENGTH])


@dataclass(frozen=True)
class StudyRecord:
    """Row of the ``study_records`` table; server-managed columns are kept but never sent."""
    date: str
    hours: int
    minutes: int
    content: typing.Optional[str] = None
    id: typing.Optional[int] = field(default=None, compare=False)
    user_id: typing.Optional[str] = field(default=None, compare=False)
    created_at: typing.Optional[str] = field(default=None, compare=False)
    updated_at: typing.Optional[str] = field(default=None, compare=False)

    @property
    def entry(self) -> StudyEntry:
        return StudyEntry(self.hours, self.minutes, self.content or '')

    def to_payload(self) -> dict:
        # content is always sent, merge-duplicates only overwrites the columns it receives
        return {'date': self.date, 'hours': self.hours, 'minutes': self.minutes, 'content': self.content or None}

    @classmethod
    def from_entry(cls, key: str, entry: StudyEntry):
        return cls(key, entry.hours, entry.minutes, entry.content or None)

    @classmethod
    def from_row(cls, row: typing.Mapping):
        return cls(date=row['date'],
                   hours=int(row['hours']),
                   minutes=int(row['minutes']),
                   content=row.get('content'),
                   id=row.get('id'),
                   user_id=row.get('user_id'),
                   created_at=row.get('created_at'),
                   updated_at=row.get('updated_at'))


@dataclass(frozen=True)
class TimeTotal:
    hours: int = 0
    minutes: int = 0

    @classmethod
    def from_minutes(cls, total: int):
        return cls(total // 60, total % 60)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def __str__(self):
        return f'{self.hours}h {self.minutes}m'


@dataclass(frozen=True)
class Totals:
    monthly: TimeTotal
    yearly: TimeTotal
    all_time: TimeTotal

    def __str__(self):
        return (f'this month: {self.monthly}\n'
                f'this year:  {self.yearly}\n'
                f'all time:   {self.all_time}')
