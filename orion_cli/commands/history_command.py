"""History command implementation."""

import readline
from typing import Any, Dict, List, Optional

from .base import Command


class HistoryCommand(Command):
    """Show console input history."""

    @property
    def name(self) -> str:
        return "history"

    @property
    def help_args(self) -> str:
        return "[<count>]"

    @property
    def help(self) -> Optional[str]:
        return "Show the last <count> entered lines"

    @property
    def max_params(self) -> Optional[int]:
        return 1

    async def execute(self, args: List[Any], context: Dict[str, Any]):
        length = readline.get_current_history_length()
        first = 1

        if args:
            count = args[0].value

            if count is None or count < 1:
                raise ValueError(f"Invalid count '{args[0]}'")

            first = max(1, length - count + 1)

        for index in range(first, length + 1):
            print(f"{index:5}  {readline.get_history_item(index)}")
