"""Helpers shared by the CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click
from pydantic import ValidationError

from bomtree import logger
from bomtree.api import BOMDocumentAPI
from bomtree.config import load_config
from bomtree.exceptions import BOMError


@contextmanager
def open_api(save: bool = True) -> Iterator[BOMDocumentAPI]:
    """Load the persisted store, yield the facade, then write it back.

    Engine and validation errors are reported as click errors and the store
    is left as it was on disk.
    """
    config = load_config()
    try:
        api = BOMDocumentAPI.load(config.store_file, strict=config.strict_node_lookup)
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load store {config.store_file}: {e}")
        raise click.ClickException(f"Cannot read store {config.store_file}: {e}")

    try:
        yield api
    except BOMError as e:
        logger.error(f"{e.code}: {e.message}")
        raise click.ClickException(e.message)
    except ValidationError as e:
        logger.error(f"Validation failed: {e}")
        raise click.ClickException(f"Invalid input:\n{e}")

    if save:
        api.save(config.store_file)


def resolve_document_id(api: BOMDocumentAPI, document_id: str | None) -> str:
    """Use the given id, or fall back to the selected document."""
    if document_id:
        return document_id
    selected = api.selected
    if selected is None:
        raise click.ClickException(
            "No BOM document selected. Create one with 'bomtree doc create' "
            "or pass --doc."
        )
    return selected.id
