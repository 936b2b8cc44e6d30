"""Configuration management commands."""

import click

from bomtree import logger
from bomtree.config import create_default_config, get_config_file, load_config


@click.group("config")
def config_group() -> None:
    """Manage bomtree configuration."""


@config_group.command("init")
def init_config() -> None:
    """Initialize configuration file with default settings.

    Creates ~/.bomtree/config.toml.
    """
    try:
        create_default_config()
        click.echo(f"✓ Configuration file: {get_config_file()}")
    except Exception as e:
        click.echo(f"❌ Failed to create config file: {e}")
        logger.error(f"Config init failed: {e}")
        raise click.exceptions.Exit(1)


@config_group.command("show")
def show_config() -> None:
    """Display the active configuration."""
    config_file = get_config_file()
    if config_file.exists():
        click.echo(f"Configuration file: {config_file}\n")
    else:
        click.echo(f"⚠️  No config file found at {config_file} (using defaults)\n")

    config = load_config()
    click.echo(f"Store file:         {config.store_file}")
    click.echo(f"Strict node lookup: {'on' if config.strict_node_lookup else 'off'}")
