import click

from study_calendar.common import shift_month
from study_calendar.context import pass_study_calendar, StudyCalendarContext
from study_calendar.model.grid import month_grid
from study_calendar.render import MonthRenderer
from .common import load_store, month_option, today


@month_option
@click.option('--shift', '-s', help='Months to move from --month, e.g. -1 for the previous one', type=int, default=0)
@click.option('--color/--no-color', default=True, help='Colorize the calendar')
@click.command()
@pass_study_calendar
def show(ctx: StudyCalendarContext, month, shift, color):
    current_day = today(ctx)
    store = load_store(ctx)
    reference = month.date() if month else current_day
    if shift:
        reference = shift_month(reference, shift)
    click.echo(str(store.totals(reference)))
    click.echo()
    renderer = MonthRenderer(store.ledger, current_day, color=color)
    click.echo(renderer.render(reference, month_grid(reference)))
