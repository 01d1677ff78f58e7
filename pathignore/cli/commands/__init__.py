"""CLI commands for pathignore."""

from pathignore.cli.commands.check_ignore import check_ignore_cmd
from pathignore.cli.commands.ls_patterns import ls_patterns_cmd
from pathignore.cli.commands.config import config_cmd

__all__ = ['check_ignore_cmd', 'ls_patterns_cmd', 'config_cmd']
