"""Main CLI entry point for Rift."""

import logging
import os

import click
from colorama import init

from rift import __version__
from rift.cli.commands import init_cmd, add_cmd, commit_cmd, status_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging for a CLI run.
    
    RIFT_DEBUG or --verbose selects DEBUG, otherwise RIFT_LOG_LEVEL
    names the level (default WARNING).
    """
    if verbose or os.environ.get('RIFT_DEBUG'):
        level = logging.DEBUG
    else:
        name = os.environ.get('RIFT_LOG_LEVEL', 'WARNING').upper()
        level = getattr(logging, name, None)
        if not isinstance(level, int):
            level = logging.WARNING
    
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


@click.group()
@click.version_option(version=__version__, prog_name='rift')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Rift - a minimal content-addressable version control system."""
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(status_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
