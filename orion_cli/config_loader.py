"""Configuration loader module."""

import copy
import logging
from typing import Any, Dict

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
    "console": {
        "prompt": "> ",
        "historyFile": ".orion_cli_history",
        "historyLength": 1000,
    },
    "help": {
        "minimumWidth": 0,
    },
}


class ConfigLoader:
    """Load configuration from YAML file."""

    @staticmethod
    def load(config_path: str = "config.yaml") -> Dict[str, Any]:
        """Load configuration from YAML file and merge it over the defaults."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}

            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration root must be a mapping: {config_path}")

            logging.info("Configuration loaded from %s", config_path)

            return ConfigLoader.merge(loaded)
        except FileNotFoundError:
            logging.error("Configuration file not found: %s", config_path)

            raise
        except yaml.YAMLError as e:
            logging.error("Invalid YAML in configuration file: %s", e)

            raise

    @staticmethod
    def merge(overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Merge configuration sections over the defaults."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        for section, values in overrides.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values

        return config
