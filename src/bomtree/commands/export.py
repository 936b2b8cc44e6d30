"""CLI commands for the `bomtree export` subgroup."""

import click

from bomtree import logger
from bomtree.commands.session import open_api, resolve_document_id
from bomtree.export import write_csv


@click.group("export")
def export() -> None:
    """Export BOM documents to flat files."""


@export.command("csv")
@click.argument("document_id", required=False)
@click.option(
    "-o",
    "--output",
    "output_file",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output CSV filename.",
)
def export_csv(document_id: str | None, output_file: str) -> None:
    """Write DOCUMENT_ID (default: the selected document) as a flat CSV.

    Rows are depth-first with a Level column, so the tree can be rebuilt
    from the file.
    """
    with open_api(save=False) as api:
        document = api.read_tree(resolve_document_id(api, document_id))

    try:
        count = write_csv(document, output_file)
    except OSError as e:
        logger.error(f"CSV export to {output_file} failed: {e}")
        raise click.ClickException(f"Failed to write {output_file}: {e}")

    logger.info(f"Exported {count} row(s) of {document.id} to {output_file}")
    click.echo(f"✓ Wrote {count} row(s) to {output_file}")
