"""CLI commands for the `bomtree doc` subgroup."""

import click

from bomtree.commands.session import open_api, resolve_document_id
from bomtree.models.document import BOMSearchFilters, BOMStatus, EquipmentRef
from bomtree.models.item import PartType
from bomtree.ui.table import BOMTreeTable, DocumentListTable, fmt_money


@click.group("doc")
def doc() -> None:
    """Create, select and inspect BOM documents."""


@doc.command("create")
@click.option("--equipment-id", required=True, help="Equipment registry id.")
@click.option("--code", "equipment_code", required=True, help="Equipment code.")
@click.option("--name", "equipment_name", default="", help="Equipment name.")
@click.option("--version", default="v1.0", show_default=True, help="BOM version.")
@click.option("--created-by", default="", help="Author of the document.")
def create(
    equipment_id: str,
    equipment_code: str,
    equipment_name: str,
    version: str,
    created_by: str,
) -> None:
    """Create an empty draft BOM and select it."""
    with open_api() as api:
        document = api.create_document(
            EquipmentRef(id=equipment_id, code=equipment_code, name=equipment_name),
            version=version,
            created_by=created_by,
        )
    click.echo(f"✓ Created BOM document {document.id} ({document.equipment_code})")


@doc.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in BOMStatus], case_sensitive=False),
    default=None,
    help="Only documents in this status.",
)
@click.option("--code", "equipment_code", default=None, help="Equipment code filter.")
@click.option("--name", "equipment_name", default=None, help="Equipment name filter.")
@click.option("--part-code", default=None, help="Documents containing this part code.")
@click.option("--part-name", default=None, help="Documents containing this part name.")
@click.option(
    "--part-type",
    type=click.Choice([t.value for t in PartType], case_sensitive=False),
    default=None,
    help="Documents containing a part of this type.",
)
@click.option("--manufacturer", default=None, help="Documents with this manufacturer.")
def list_documents(**criteria) -> None:
    """List BOM documents, optionally filtered."""
    filters = BOMSearchFilters(**criteria)
    with open_api(save=False) as api:
        documents = api.documents if filters.is_empty else api.search(filters)
        selected_id = api.store.selected_id

    if not documents:
        click.echo("No BOM documents found.")
        return
    DocumentListTable(documents, selected_id).render()


@doc.command("select")
@click.argument("document_id")
def select(document_id: str) -> None:
    """Make DOCUMENT_ID the current document."""
    with open_api() as api:
        document = api.select_document(document_id)
    click.echo(f"✓ Selected {document.id} ({document.equipment_code})")


@doc.command("show")
@click.argument("document_id", required=False)
@click.option(
    "--all", "expand_all", is_flag=True, help="Show children of collapsed items too."
)
def show(document_id: str | None, expand_all: bool) -> None:
    """Show the item tree of DOCUMENT_ID (default: the selected document)."""
    with open_api(save=False) as api:
        document = api.read_tree(resolve_document_id(api, document_id))

    if not document.items:
        click.echo(
            f"{document.equipment_code}: no items yet "
            f"(total cost {fmt_money(document.total_cost)})"
        )
        return
    BOMTreeTable(document, expand_all=expand_all).render()


@doc.command("approve")
@click.argument("document_id")
@click.option("--by", "approved_by", required=True, help="Approver name.")
def approve(document_id: str, approved_by: str) -> None:
    """Mark DOCUMENT_ID as approved."""
    with open_api() as api:
        document = api.approve(document_id, approved_by)
    click.echo(f"✓ {document.id} approved by {approved_by}")


@doc.command("status")
@click.argument("document_id")
@click.argument(
    "status", type=click.Choice([s.value for s in BOMStatus], case_sensitive=False)
)
def set_status(document_id: str, status: str) -> None:
    """Set the lifecycle STATUS of DOCUMENT_ID."""
    with open_api() as api:
        document = api.set_status(document_id, BOMStatus(status.lower()))
    click.echo(f"✓ {document.id} is now {document.status.value}")


@doc.command("remove")
@click.argument("document_id")
@click.confirmation_option(prompt="Remove this BOM document and all its items?")
def remove(document_id: str) -> None:
    """Remove DOCUMENT_ID from the store."""
    with open_api() as api:
        api.remove_document(document_id)
    click.echo(f"✓ Removed {document_id}")
