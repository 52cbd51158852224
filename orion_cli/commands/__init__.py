"""Command classes for the command handler."""

from .base import Command
from .help_command import HelpCommand
from .history_command import HistoryCommand
from .loglevel_command import LogLevelCommand
from .quit_command import QuitCommand

__all__ = [
    "Command",
    "HelpCommand",
    "HistoryCommand",
    "LogLevelCommand",
    "QuitCommand",
]
