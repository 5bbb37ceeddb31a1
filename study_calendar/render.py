import datetime
import typing

import click

from study_calendar.common import date_key
from study_calendar.model.entry import StudyEntry
from study_calendar.model.grid import CalendarCell, WEEK_DAYS, weeks

CELL_WIDTH = 10


def format_entry(entry: StudyEntry) -> str:
    return f'{entry.hours}h' + (f' {entry.minutes}m' if entry.minutes > 0 else '')


def _fit(text: str, width: int = CELL_WIDTH) -> str:
    if len(text) > width:
        text = text[:width - 1] + '…'
    return text.ljust(width)


class MonthRenderer:

    _week_day_colors = {0: 'red', 6: 'blue'}

    def __init__(self, ledger: typing.Mapping[str, StudyEntry], today: datetime.date, color: bool = True):
        self._ledger = ledger
        self._today = today
        self._color = color

    def style(self, text, **kwargs):
        return click.style(text, **kwargs) if self._color else text

    def title(self, reference: datetime.date) -> str:
        return f'{reference.strftime("%B")} {reference.year}'

    def header(self) -> str:
        return '|'.join(self.style(_fit(day), fg=self._week_day_colors.get(idx), bold=True)
                        for idx, day in enumerate(WEEK_DAYS))

    def cell_lines(self, cell: CalendarCell) -> list[str]:
        day = _fit(str(cell.date.day))
        if cell.date == self._today:
            day = self.style(day, fg='white', bg='blue', bold=True)
        elif not cell.is_current_month:
            day = self.style(day, dim=True)
        entry = self._ledger.get(date_key(cell.date)) if cell.is_current_month else None
        if entry is None:
            return [day, _fit(''), _fit('')]
        return [day, _fit(format_entry(entry)), self.style(_fit(entry.content), dim=True)]

    def render(self, reference: datetime.date, cells: typing.Sequence[CalendarCell]) -> str:
        separator = '+'.join('-' * CELL_WIDTH for _ in WEEK_DAYS)
        lines = [self.style(self.title(reference), bold=True), self.header(), separator]
        for week in weeks(cells):
            columns = [self.cell_lines(cell) for cell in week]
            for row in zip(*columns):
                lines.append('|'.join(row))
            lines.append(separator)
        return '\n'.join(lines)
