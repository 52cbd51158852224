import pytest
import yaml

from orion_cli.config_loader import DEFAULT_CONFIG, ConfigLoader


def test_load_merges_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("console:\n  prompt: 'orion> '\nhelp:\n  minimumWidth: 20\n")

    config = ConfigLoader.load(str(path))

    assert config["console"]["prompt"] == "orion> "
    assert config["console"]["historyLength"] == 1000
    assert config["help"]["minimumWidth"] == 20
    assert config["logging"] == DEFAULT_CONFIG["logging"]


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert ConfigLoader.load(str(path)) == DEFAULT_CONFIG


def test_merge_does_not_touch_defaults():
    ConfigLoader.merge({"help": {"minimumWidth": 99}})

    assert DEFAULT_CONFIG["help"]["minimumWidth"] == 0


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load(str(tmp_path / "missing.yaml"))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("console: [unclosed\n")

    with pytest.raises(yaml.YAMLError):
        ConfigLoader.load(str(path))


def test_non_mapping_root(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        ConfigLoader.load(str(path))
