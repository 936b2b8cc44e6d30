"""Configuration management for the BOM engine and CLI."""

import os
import tomllib
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field

_TRUE_VALUES = {"1", "true", "yes", "on"}


class EngineConfig(BaseModel):
    """Runtime configuration for the engine."""

    store_file: Path = Field(description="JSON file the CLI persists documents to")
    strict_node_lookup: bool = Field(
        False,
        description="Raise NodeNotFoundError instead of ignoring operations "
        "that target a missing node",
    )


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_dir = Path.home() / ".bomtree"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / "config.toml"


def get_default_store_file() -> Path:
    return get_config_dir() / "store.json"


def load_config() -> EngineConfig:
    """
    Load engine configuration.

    Precedence order:
    1. ``BOMTREE_STORE_FILE`` / ``BOMTREE_STRICT`` environment variables
    2. ``~/.bomtree/config.toml`` → ``[engine]`` section
    3. Built-in defaults

    A config file that cannot be parsed is logged and ignored.
    """
    store_file: str | None = os.getenv("BOMTREE_STORE_FILE")
    strict_env = os.getenv("BOMTREE_STRICT")
    strict: bool | None = (
        strict_env.strip().lower() in _TRUE_VALUES if strict_env is not None else None
    )

    config_file = get_config_file()
    if config_file.exists():
        try:
            with open(config_file, "rb") as f:
                config_data = tomllib.load(f)
            engine_section = config_data.get("engine", {})
            if not store_file:
                store_file = engine_section.get("store_file")
            if strict is None and "strict_node_lookup" in engine_section:
                strict = bool(engine_section["strict_node_lookup"])
            logger.debug(f"Loaded config from {config_file}")
        except Exception as e:
            logger.warning(f"Failed to load config file: {e}")

    return EngineConfig(
        store_file=Path(store_file).expanduser()
        if store_file
        else get_default_store_file(),
        strict_node_lookup=bool(strict),
    )


def create_default_config() -> None:
    """Create a default configuration file with example settings."""
    config_file = get_config_file()

    if config_file.exists():
        logger.warning(f"Config file already exists at {config_file}")
        return

    default_content = """# bomtree configuration

[engine]
# Where the CLI keeps BOM documents (can also be set via BOMTREE_STORE_FILE)
# store_file = "~/.bomtree/store.json"

# Report operations against missing nodes as errors instead of ignoring them
# (can also be set via BOMTREE_STRICT=1)
strict_node_lookup = false
"""

    config_file.write_text(default_content)
    logger.info(f"Created default config file at {config_file}")
