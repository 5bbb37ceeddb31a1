import click

from study_calendar.common import date_key
from study_calendar.context import pass_study_calendar, StudyCalendarContext
from study_calendar.errors import StoreError
from .common import load_store


@click.argument('day', type=click.DateTime(formats=['%Y-%m-%d']))
@click.command()
@pass_study_calendar
def delete(ctx: StudyCalendarContext, day):
    key = date_key(day)
    store = load_store(ctx)
    if store.total_for(key) is None:
        click.echo(f'{key}: nothing recorded')
        return
    try:
        store.remove(key)
    except StoreError:
        click.secho(store.error, fg='red', err=True)
        raise click.exceptions.Exit(1)
    click.echo(f'{key}: deleted')
