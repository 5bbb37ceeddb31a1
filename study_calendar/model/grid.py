import datetime
import typing
from dataclasses import dataclass

from study_calendar.common import DaysRange, parse_date_key
from study_calendar.model.entry import StudyEntry, TimeTotal, Totals

GRID_SIZE = 42
WEEK_DAYS = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')

Ledger = typing.Mapping[str, StudyEntry]
DatePredicate = typing.Callable[[datetime.date], bool]


@dataclass(frozen=True)
class CalendarCell:
    date: datetime.date
    is_current_month: bool


def first_weekday(reference: datetime.date) -> int:
    """Weekday of the 1st of the month, 0 being Sunday."""
    return (reference.replace(day=1).isoweekday()) % 7


def month_grid(reference: datetime.date) -> list[CalendarCell]:
    first = reference.replace(day=1)
    start = first - datetime.timedelta(days=first_weekday(first))
    return [CalendarCell(day, (day.year, day.month) == (first.year, first.month))
            for day in DaysRange.days(start, GRID_SIZE)]


def weeks(cells: typing.Sequence[CalendarCell]) -> list[list[CalendarCell]]:
    return [list(cells[i:i + 7]) for i in range(0, len(cells), 7)]


def same_month(reference: datetime.date) -> DatePredicate:
    return lambda day: day.year == reference.year and day.month == reference.month


def same_year(reference: datetime.date) -> DatePredicate:
    return lambda day: day.year == reference.year


def aggregate(ledger: Ledger, predicate: DatePredicate = None) -> TimeTotal:
    total = 0
    for key, entry in ledger.items():
        if predicate is not None:
            try:
                day = parse_date_key(key)
            except ValueError:
                continue
            if not predicate(day):
                continue
        total += entry.total_minutes
    return TimeTotal.from_minutes(total)


def monthly_total(ledger: Ledger, reference: datetime.date) -> TimeTotal:
    return aggregate(ledger, same_month(reference))


def yearly_total(ledger: Ledger, reference: datetime.date) -> TimeTotal:
    return aggregate(ledger, same_year(reference))


def all_time_total(ledger: Ledger) -> TimeTotal:
    return aggregate(ledger)


def totals(ledger: Ledger, reference: datetime.date) -> Totals:
    return Totals(monthly_total(ledger, reference), yearly_total(ledger, reference), all_time_total(ledger))
