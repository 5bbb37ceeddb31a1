import click

from study_calendar.context import pass_study_calendar, StudyCalendarContext
from .common import load_store, month_option, today


@month_option
@click.command()
@pass_study_calendar
def totals(ctx: StudyCalendarContext, month):
    store = load_store(ctx)
    reference = month.date() if month else today(ctx)
    click.echo(str(store.totals(reference)))
