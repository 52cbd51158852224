"""Help command implementation."""

from typing import Any, Dict, List, Optional

from ..help_renderer import show_help
from .base import Command


class HelpCommand(Command):
    """Display available commands."""

    @property
    def name(self) -> str:
        return "help"

    @property
    def help_args(self) -> str:
        return "[<command>]"

    @property
    def help(self) -> Optional[str]:
        return "Display this help message\nor the help of a single command"

    @property
    def max_params(self) -> Optional[int]:
        return 1

    @property
    def aliases(self) -> List[str]:
        return ["?"]

    async def execute(self, args: List[Any], context: Dict[str, Any]):
        """
        Display all available commands or a single one.

        Args:
            args: Optional command name
            context: Context with command table and config
        """
        descriptors = context.get("descriptors", [])
        minimum_width = context.get("config", {}).get("help", {}).get("minimumWidth", 0)

        if args:
            descriptors = self._select(descriptors, str(args[0]))

        show_help(descriptors, minimum_width)

    @staticmethod
    def _select(descriptors, name: str):
        """Select the visible descriptors for a command name or alias."""
        matches = [d for d in descriptors if d.name.lower() == name.lower()]

        if not matches:
            raise ValueError(f"Unknown command '{name}'")

        # Aliases resolve through the handler they share with the visible entry
        handlers = [d.handler for d in matches if d.handler is not None]

        return [d for d in descriptors if d.help_text is not None and (d in matches or d.handler in handlers)]
