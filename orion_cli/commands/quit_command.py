"""Quit command implementation."""

import logging
from typing import Any, Dict, List, Optional

from .base import Command


class QuitCommand(Command):
    """Exit the console."""

    @property
    def name(self) -> str:
        return "quit"

    @property
    def help_args(self) -> str:
        return ""

    @property
    def help(self) -> Optional[str]:
        return "Leave the console"

    @property
    def aliases(self) -> List[str]:
        return ["exit", "q"]

    async def execute(self, args: List[Any], context: Dict[str, Any]):
        """Stop the input loop."""
        logging.info("Receive exit command, shut down")

        print("Shutting down...")

        handler = context.get("handler")

        if handler:
            handler.running = False
