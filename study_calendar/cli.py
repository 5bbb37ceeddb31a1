import logging
import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from study_calendar.context import StudyCalendarContext
from study_calendar.study.commands import study


class ClickHandler(logging.Handler):

    def emit(self, record):
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


@click.group(context_settings={'auto_envvar_prefix': 'STUDY_CALENDAR'})
@click.option('--config', default='config.yaml', type=click.Path())
@click.option('--verbose', '-v', is_flag=True, help='Log store and cache activity')
@click.pass_context
def entry_point(ctx, config, verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.ERROR,
                        format='%(levelname)s %(name)s: %(message)s',
                        handlers=[ClickHandler()])
    settings = {}
    if os.path.exists(config):
        with open(config, 'r') as f:
            settings = load(f.read(), Loader=Loader) or {}
        ctx.default_map = settings
    ctx.obj = StudyCalendarContext(settings)


entry_point.add_command(study)


if __name__ == '__main__':
    entry_point()
