import click

from study_calendar.common import date_key
from study_calendar.context import pass_study_calendar, StudyCalendarContext
from study_calendar.errors import StoreError
from study_calendar.model.entry import StudyEntry, MAX_CONTENT_LENGTH
from study_calendar.render import format_entry
from .common import load_store


@click.argument('day', type=click.DateTime(formats=['%Y-%m-%d']))
@click.option('--hours', '-h', help='Hours studied (0-23), kept from the existing entry when omitted')
@click.option('--minutes', '-m', help='Minutes studied (0-59), kept from the existing entry when omitted')
@click.option('--content', '-c', help=f'What was studied, up to {MAX_CONTENT_LENGTH} characters; '
                                      f'pass an empty string to clear it')
@click.command()
@pass_study_calendar
def record(ctx: StudyCalendarContext, day, hours, minutes, content):
    key = date_key(day)
    store = load_store(ctx)
    existing = store.total_for(key)
    if existing is not None:
        hours = str(existing.hours) if hours is None else hours
        minutes = str(existing.minutes) if minutes is None else minutes
        content = existing.content if content is None else content
    try:
        entry = StudyEntry.from_form(hours or '', minutes or '', content or '')
    except ValueError as e:
        raise click.UsageError(str(e))
    try:
        store.upsert(key, entry)
    except StoreError:
        click.secho(store.error, fg='red', err=True)
        raise click.exceptions.Exit(1)
    click.echo(f'{key}: {format_entry(entry)}' + (f' ({entry.content})' if entry.content else ''))
