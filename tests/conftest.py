import logging
import readline

import pytest

from orion_cli.command_handler import CommandHandler
from orion_cli.config_loader import ConfigLoader


@pytest.fixture
def config(tmp_path):
    return ConfigLoader.merge({"console": {"historyFile": str(tmp_path / "history")}})


@pytest.fixture
def handler(config):
    readline.clear_history()
    yield CommandHandler(config=config)
    readline.clear_history()


@pytest.fixture
def root_level():
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)
