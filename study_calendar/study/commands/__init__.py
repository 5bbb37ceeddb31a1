import click
from .show import show
from .record import record
from .delete import delete
from .totals import totals


@click.group()
def study():
    pass


study.add_command(show)
study.add_command(record)
study.add_command(delete)
study.add_command(totals)
