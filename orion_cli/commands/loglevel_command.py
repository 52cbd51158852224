"""Log level command implementation."""

import logging
from typing import Any, Dict, List, Optional

from .base import Command


class LogLevelCommand(Command):
    """Change log level at runtime."""

    VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    @property
    def name(self) -> str:
        return "loglevel"

    @property
    def help_args(self) -> str:
        return "<level>"

    @property
    def help(self) -> Optional[str]:
        return f"Change log level\n({', '.join(self.VALID_LEVELS)})"

    @property
    def min_params(self) -> int:
        return 1

    @property
    def max_params(self) -> Optional[int]:
        return 1

    async def execute(self, args: List[Any], context: Dict[str, Any]):
        """
        Change the log level at runtime.

        Args:
            args: Log level token
            context: Context with handler and config references
        """
        level_str = str(args[0]).upper()

        if level_str not in self.VALID_LEVELS:
            raise ValueError(f"Invalid log level '{level_str}'. Valid levels: {', '.join(self.VALID_LEVELS)}")

        logging.getLogger().setLevel(getattr(logging, level_str))

        logging.info("Change log level to %s", level_str)

        print(f"Log level changed to {level_str}")
