import click

from study_calendar.context import StudyCalendarContext
from study_calendar.errors import ConfigError
from study_calendar.store import StudyRecordStore

month_option = click.option('--month', '-m',
                            help='Month in YYYY-MM format, current month by default',
                            required=False,
                            type=click.DateTime(formats=['%Y-%m']))


def load_store(ctx: StudyCalendarContext) -> StudyRecordStore:
    """Build the store and run the startup load; a failed load only prints a warning."""
    try:
        store = ctx.store
    except ConfigError as e:
        raise click.UsageError(str(e))
    if click.get_text_stream('stderr').isatty():
        click.echo('loading study records...', err=True)
    _, error = store.load()
    if error:
        click.secho(error, fg='red', err=True)
    return store


def today(ctx: StudyCalendarContext):
    try:
        return ctx.today()
    except ConfigError as e:
        raise click.UsageError(str(e))
