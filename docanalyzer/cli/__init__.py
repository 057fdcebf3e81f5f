"""Command line interface for docanalyzer."""

from .app import create_cli_app, run_cli
from .commands import register_cli_commands

__all__ = ["create_cli_app", "register_cli_commands", "run_cli"]
