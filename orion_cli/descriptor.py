"""Command table entries."""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

Handler = Callable[[List[Any], Dict[str, Any]], Awaitable[None]]


@dataclass(frozen=True)
class CommandDescriptor:
    """One entry of a command table.

    A descriptor without help text is left out of the help listing; aliases
    are declared this way.
    """

    name: str
    param_hint: Optional[str] = None
    help_text: Optional[str] = None
    handler: Optional[Handler] = None
    min_params: int = 0
    max_params: Optional[int] = 0

    @property
    def usage(self) -> str:
        return f"{self.name} {self.param_hint or ''}".strip()

    def accepts(self, num_params: int) -> bool:
        """Check whether the command takes the given number of parameters."""
        if num_params < self.min_params:
            return False

        return self.max_params is None or num_params <= self.max_params
