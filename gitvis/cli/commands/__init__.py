"""CLI commands for gitvis."""

from gitvis.cli.commands.shell import shell_cmd, run_cmd
from gitvis.cli.commands.config import config_cmd

__all__ = ['shell_cmd', 'run_cmd', 'config_cmd']
