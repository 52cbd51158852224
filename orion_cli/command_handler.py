"""Command handler for console input."""

import asyncio
import logging
import os
import readline
import signal
from typing import Any, Dict, List, Optional

from .commands import Command, HelpCommand, HistoryCommand, LogLevelCommand, QuitCommand
from .config_loader import DEFAULT_CONFIG
from .descriptor import CommandDescriptor
from .tokenizer import tokenize


class CommandHandler:
    """Handler for console commands."""

    def __init__(self, config=None, context=None, commands: Optional[List[Command]] = None):
        """
        Initialize command handler.

        Args:
            config: Configuration dictionary
            context: Extra entries passed to every command, e.g. the host game
            commands: Commands to register, the built-in set when omitted
        """
        self.config = config or DEFAULT_CONFIG
        self.extra_context = context or {}
        self.descriptors: List[CommandDescriptor] = []
        self.running = True

        console_config = self.config.get("console", {})
        self.prompt = console_config.get("prompt", "> ")
        self.history_file = os.path.expanduser(console_config.get("historyFile", ".orion_cli_history"))
        self.history_length = console_config.get("historyLength", 1000)

        self._setup_history()
        self._register_commands(commands)

    def complete_names(self, text: str) -> List[str]:
        """
        List command names starting with the given text.

        Args:
            text: Typed prefix

        Returns:
            Visible command names first, then aliases, in table order
        """
        text = text.lower()
        matches = [d for d in self.descriptors if d.name.lower().startswith(text)]

        return [d.name for d in matches if d.help_text is not None] + [d.name for d in matches if d.help_text is None]

    def _completer(self, text: str, state: int) -> Optional[str]:
        """Readline completer for the first word of the line."""
        line = readline.get_line_buffer()
        words = line.lstrip().split()

        if words and (len(words) > 1 or line.endswith(" ")):
            return None

        options = self.complete_names(text)

        return options[state] if state < len(options) else None

    def _setup_history(self):
        """Setup readline history and completion."""
        try:
            readline.parse_and_bind("tab: complete")
            readline.set_completer(self._completer)
            readline.set_completer_delims(" \t\n")
            readline.set_history_length(self.history_length)

            if os.path.exists(self.history_file):
                readline.read_history_file(self.history_file)

                logging.info("Load command history from %s", self.history_file)

        except OSError as e:
            logging.warning("Fail to setup history: %s", e)

    def _save_history(self):
        """Save command history to file."""
        try:
            readline.write_history_file(self.history_file)

            logging.info("Save command history to %s", self.history_file)

        except OSError as e:
            logging.warning("Fail to save history: %s", e)

    def _register_commands(self, commands: Optional[List[Command]]):
        """Register available commands."""
        if commands is None:
            commands = [
                HelpCommand(),
                LogLevelCommand(),
                HistoryCommand(),
                QuitCommand(),
            ]

        for cmd in commands:
            self.descriptors.extend(cmd.descriptors())

    def find_descriptor(self, name: str) -> Optional[CommandDescriptor]:
        """Find the command table entry for a command name or alias."""
        name = name.lower()

        for descriptor in self.descriptors:
            if descriptor.name.lower() == name:
                return descriptor

        return None

    def _get_context(self) -> Dict[str, Any]:
        """Get context dictionary for command execution."""
        context = dict(self.extra_context)
        context.update(
            {
                "config": self.config,
                "descriptors": self.descriptors,
                "handler": self,
            }
        )

        return context

    async def process_command(self, command_line: str):
        """
        Process a command line input.

        Args:
            command_line: Full command line string
        """
        try:
            tokens = tokenize(command_line)
        except ValueError as e:
            print(f"Error: {e}")

            return

        if not tokens:
            return

        command = tokens[0].text
        args = tokens[1:]
        descriptor = self.find_descriptor(command)

        if descriptor is None or descriptor.handler is None:
            print(f"Unknown command: {command}")
            print("Type 'help' for available commands")

            return

        if not descriptor.accepts(len(args)):
            print(f"Error: wrong number of parameters for '{descriptor.name}'")
            print(f"Usage: {descriptor.usage}")

            return

        try:
            await descriptor.handler(args, self._get_context())
        except Exception as e:
            logging.error("Fail to execute command %s: %s", descriptor.name, e)

            print(f"Error: {e}")

            if descriptor.param_hint:
                print(f"Usage: {descriptor.usage}")

    def _interrupt(self):
        """Handle Ctrl+C without leaving the console."""
        logging.info("Receive keyboard interrupt")

        print("\n\nUse 'quit' command to leave the console.")

    async def run(self):
        """Run the command handler loop."""
        logging.info("Start command handler. Type 'help' for available commands")

        print("\nCommand handler ready. Type 'help' for available commands.")

        loop = asyncio.get_running_loop()

        # asyncio.run() turns SIGINT into task cancellation unless the loop handles it
        try:
            loop.add_signal_handler(signal.SIGINT, self._interrupt)
            sigint_handled = True
        except (NotImplementedError, RuntimeError, ValueError) as e:
            logging.warning("Fail to install interrupt handler: %s", e)
            sigint_handled = False

        try:
            while self.running:
                try:
                    # input() runs in an executor so readline editing stays available
                    command_line = await loop.run_in_executor(None, input, self.prompt)

                    if not command_line:
                        continue

                    await self.process_command(command_line)

                except EOFError:
                    break
                except KeyboardInterrupt:
                    self._interrupt()
        finally:
            if sigint_handled:
                loop.remove_signal_handler(signal.SIGINT)

            self._save_history()

            logging.info("Stop command handler")
