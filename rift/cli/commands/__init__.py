"""CLI commands for Rift."""

from rift.cli.commands.init import init_cmd
from rift.cli.commands.add import add_cmd
from rift.cli.commands.commit import commit_cmd
from rift.cli.commands.status import status_cmd
from rift.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'status_cmd', 'config_cmd']
