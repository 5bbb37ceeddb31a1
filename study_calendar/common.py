import datetime
import typing

DATE_KEY_FORMAT = '%Y-%m-%d'


def date_key(day: typing.Union[datetime.date, datetime.datetime], tz: datetime.tzinfo = None) -> str:
    """Ledger key for a calendar day, always built from local calendar fields.

    Plain dates are formatted as they are and naive datetimes are taken as local
    wall-clock time. Aware datetimes are converted to ``tz`` (or the process
    local zone when ``tz`` is None) before the day is read, so an entry logged at
    00:30 local time never lands on the previous UTC day.
    """
    if isinstance(day, datetime.datetime):
        if day.tzinfo is not None:
            day = day.astimezone(tz)
        day = day.date()
    return f'{day.year:04d}-{day.month:02d}-{day.day:02d}'


def parse_date_key(key: str) -> datetime.date:
    return datetime.datetime.strptime(key, DATE_KEY_FORMAT).date()


def shift_month(date: datetime.date, months: int) -> datetime.date:
    # always lands on the 1st, so 31 Jan + 1 is February and not March
    index = date.year * 12 + date.month - 1 + months
    return datetime.date(index // 12, index % 12 + 1, 1)


def local_today(tz: datetime.tzinfo = None) -> datetime.date:
    if tz is None:
        return datetime.date.today()
    return datetime.datetime.now(tz).date()


class DaysRange:

    def __init__(self, start_date, end_date):
        if start_date > end_date:
            raise ValueError(f'start date ({start_date.strftime(DATE_KEY_FORMAT)}) '
                             f'is after end date ({end_date.strftime(DATE_KEY_FORMAT)})')
        self._start = start_date
        self._end = end_date

    def __iter__(self):
        delta = self._end - self._start
        for i in range(delta.days + 1):
            yield self._start + datetime.timedelta(days=i)

    def __len__(self):
        return (self._end - self._start).days + 1

    @classmethod
    def days(cls, start: datetime.date, count: int):
        return cls(start, start + datetime.timedelta(days=count - 1))
