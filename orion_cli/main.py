#!/usr/bin/env python3
"""
Orion Console
Interactive command console with YAML configuration support.
"""

import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import Optional

from .command_handler import CommandHandler
from .config_loader import ConfigLoader


class OrionConsole:
    """Main application running the command console."""

    def __init__(self, config_path: Optional[str] = None):
        # Setup basic logging first
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        # Default config ships inside the package
        if config_path is None:
            config_path = str(Path(__file__).parent / "config.yaml")

        self.config = ConfigLoader.load(config_path)
        self.command_handler = None
        self._setup_logging()  # Reconfigure with config settings

    def run(self):
        """Run the console until the quit command or interrupt."""
        self.command_handler = CommandHandler(config=self.config)

        try:
            asyncio.run(self.command_handler.run())
        except KeyboardInterrupt:
            logging.info("Interrupt application")

    def _setup_logging(self):
        """Configure logging based on config."""
        log_config = self.config.get("logging", {})
        level = getattr(logging, str(log_config.get("level", "INFO")).upper())
        format_str = log_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        logging.basicConfig(level=level, format=format_str, force=True)


def main():
    """Entry point for the application."""

    def signal_handler(sig, frame):
        logging.info("Receive terminate signal")
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)

    try:
        app = OrionConsole(*sys.argv[1:2])
        app.run()
    except Exception as e:
        logging.error(f"Application error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
