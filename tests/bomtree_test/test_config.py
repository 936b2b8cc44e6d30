"""Tests for engine configuration management."""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

from bomtree.config import (
    EngineConfig,
    create_default_config,
    get_config_file,
    load_config,
)


def test_engine_config_defaults():
    config = EngineConfig(store_file=Path("/tmp/store.json"))
    assert config.strict_node_lookup is False


def test_get_config_file(isolated_home):
    assert get_config_file() == isolated_home / ".bomtree" / "config.toml"
    assert (isolated_home / ".bomtree").is_dir()


def test_defaults_without_file_or_env(isolated_home):
    config = load_config()

    assert config.store_file == isolated_home / ".bomtree" / "store.json"
    assert config.strict_node_lookup is False


def test_load_from_file(isolated_home):
    get_config_file().write_text(
        '[engine]\nstore_file = "/data/boms.json"\nstrict_node_lookup = true\n'
    )

    config = load_config()

    assert config.store_file == Path("/data/boms.json")
    assert config.strict_node_lookup is True


def test_env_overrides_file(isolated_home):
    get_config_file().write_text(
        '[engine]\nstore_file = "/data/boms.json"\nstrict_node_lookup = true\n'
    )
    env = {"BOMTREE_STORE_FILE": "/env/store.json", "BOMTREE_STRICT": "0"}

    with patch.dict(os.environ, env):
        config = load_config()

    assert config.store_file == Path("/env/store.json")
    assert config.strict_node_lookup is False


def test_strict_env_values(isolated_home):
    for value, expected in (("1", True), ("true", True), ("YES", True), ("off", False)):
        with patch.dict(os.environ, {"BOMTREE_STRICT": value}):
            assert load_config().strict_node_lookup is expected


def test_malformed_file_is_ignored(isolated_home):
    get_config_file().write_text("[engine\nstrict_node_lookup = tru")

    config = load_config()

    assert config.strict_node_lookup is False
    assert config.store_file == isolated_home / ".bomtree" / "store.json"


def test_env_used_when_file_unreadable(isolated_home):
    mock_config_file = MagicMock(spec=Path)
    mock_config_file.exists.return_value = True

    with patch("bomtree.config.get_config_file", return_value=mock_config_file):
        with patch(
            "bomtree.config.tomllib.load", side_effect=Exception("Malformed TOML")
        ):
            with patch.dict(os.environ, {"BOMTREE_STRICT": "1"}):
                config = load_config()

    assert config.strict_node_lookup is True


def test_file_without_engine_section(isolated_home):
    get_config_file().write_text("[other]\nkey = 1\n")
    config = load_config()
    assert config.store_file == isolated_home / ".bomtree" / "store.json"


def test_create_default_config(isolated_home):
    create_default_config()

    config_file = get_config_file()
    assert config_file.exists()
    assert "[engine]" in config_file.read_text()
    assert load_config().strict_node_lookup is False


def test_create_default_config_keeps_existing(isolated_home):
    get_config_file().write_text("[engine]\nstrict_node_lookup = true\n")
    create_default_config()
    assert load_config().strict_node_lookup is True
