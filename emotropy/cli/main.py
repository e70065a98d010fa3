import click

from emotropy.cli.classify import classify
from emotropy.cli.profiles import profiles
from emotropy.cli.run import run
from emotropy.logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...).")
def cli(log_level):
    """Emotropy: turn feelings into a living particle field."""
    setup_logging(log_level)


cli.add_command(classify)
cli.add_command(profiles)
cli.add_command(run)

if __name__ == '__main__':
    cli()
