import logging

import pytest

from orion_cli import main as main_module
from orion_cli.config_loader import DEFAULT_CONFIG
from orion_cli.main import OrionConsole


@pytest.fixture(autouse=True)
def keep_logging(monkeypatch):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)


def test_default_config_ships_with_package():
    assert OrionConsole().config == DEFAULT_CONFIG


def test_relative_config_path_uses_working_directory(tmp_path, monkeypatch):
    (tmp_path / "orion.yaml").write_text("help:\n  minimumWidth: 12\n")
    monkeypatch.chdir(tmp_path)

    assert OrionConsole("orion.yaml").config["help"]["minimumWidth"] == 12


def test_missing_config_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        OrionConsole("missing.yaml")


def test_main_exits_on_missing_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module.sys, "argv", ["orion-cli", "missing.yaml"])
    monkeypatch.setattr(main_module.signal, "signal", lambda *args: None)

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 1
