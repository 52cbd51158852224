"""Base command class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..descriptor import CommandDescriptor


class Command(ABC):
    """Base class for commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name."""
        ...

    @property
    @abstractmethod
    def help_args(self) -> str:
        """Arguments format for the command."""
        ...

    @property
    @abstractmethod
    def help(self) -> Optional[str]:
        """Help text for the command."""
        ...

    @property
    def min_params(self) -> int:
        return 0

    @property
    def max_params(self) -> Optional[int]:
        return 0

    @property
    def aliases(self) -> List[str]:
        return []

    @abstractmethod
    async def execute(self, args: List[Any], context: Dict[str, Any]):
        """
        Execute the command.

        Args:
            args: Command arguments as input tokens
            context: Context with handler and config references
        """
        ...

    def descriptors(self) -> List[CommandDescriptor]:
        """
        Build the command table entries for this command.

        Returns:
            Visible descriptor followed by one hidden descriptor per alias
        """
        visible = CommandDescriptor(
            name=self.name,
            param_hint=self.help_args or None,
            help_text=self.help,
            handler=self.execute,
            min_params=self.min_params,
            max_params=self.max_params,
        )
        hidden = [
            CommandDescriptor(
                name=alias,
                param_hint=visible.param_hint,
                handler=self.execute,
                min_params=self.min_params,
                max_params=self.max_params,
            )
            for alias in self.aliases
        ]

        return [visible] + hidden
