"""Main CLI entry point for pathignore."""

import logging

import click
from colorama import init

from pathignore import __version__
from pathignore.cli.output import BANNER
from pathignore.cli.commands import check_ignore_cmd, ls_patterns_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class PathIgnoreGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=PathIgnoreGroup)
@click.version_option(version=__version__)
@click.option('--debug', is_flag=True, help='Log debug messages to stderr')
def cli(debug):
    if debug:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')


cli.add_command(check_ignore_cmd)
cli.add_command(ls_patterns_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
