"""CLI commands for the `bomtree item` subgroup."""

import click

from bomtree.commands.session import open_api, resolve_document_id
from bomtree.engine.operations import Add, Delete, Edit, ToggleExpand
from bomtree.engine.traversal import count_items, find_item
from bomtree.models.item import ItemFields, PartType
from bomtree.ui.table import fmt_money

_TEXT_FIELDS = [
    ("--part-code", "Part code (e.g. BRG-01)."),
    ("--part-name", "Part name."),
    ("--specification", "Specification."),
    ("--manufacturer", "Manufacturer."),
    ("--model", "Manufacturer model."),
    ("--supplier", "Supplier."),
    ("--remarks", "Remarks."),
    ("--unit", "Unit of measure (new items default to EA)."),
]

_NUMBER_FIELDS = [
    ("--quantity", "Quantity (new items default to 1)."),
    ("--unit-price", "Unit price (new items default to 0)."),
    ("--lead-time", "Lead time in days."),
    ("--min-stock", "Minimum stock."),
    ("--current-stock", "Current stock."),
]


def item_field_options(func):
    """Attach one option per editable item field."""
    for flag, help_text in reversed(_NUMBER_FIELDS):
        func = click.option(flag, type=float, default=None, help=help_text)(func)
    func = click.option(
        "--part-type",
        type=click.Choice([t.value for t in PartType], case_sensitive=False),
        default=None,
        help="Part type (new items default to standard).",
    )(func)
    for flag, help_text in reversed(_TEXT_FIELDS):
        func = click.option(flag, default=None, help=help_text)(func)
    return func


def _doc_option(func):
    return click.option(
        "--doc",
        "document_id",
        default=None,
        help="Document id (default: the selected document).",
    )(func)


def _fields(values: dict) -> ItemFields:
    return ItemFields(**{k: v for k, v in values.items() if v is not None})


def _report_noop(kind: str, node_id: str) -> None:
    click.echo(f"⚠️  {kind}: item {node_id} not found; nothing changed.", err=True)


@click.group("item")
def item() -> None:
    """Add, edit, delete and expand/collapse BOM items."""


@item.command("add")
@_doc_option
@click.option("--parent", "parent_id", default=None, help="Parent item id.")
@item_field_options
def add(document_id: str | None, parent_id: str | None, **values) -> None:
    """Add an item at the top level, or under --parent."""
    with open_api() as api:
        op = Add(parent_id=parent_id, payload=_fields(values))
        doc_id = resolve_document_id(api, document_id)
        before = count_items(api.read_tree(doc_id).items)
        document = api.apply_item_operation(doc_id, op)

    if count_items(document.items) == before:
        _report_noop("add", parent_id)
        return
    click.echo(f"✓ Added item; total cost {fmt_money(document.total_cost)}")


@item.command("edit")
@_doc_option
@click.argument("item_id")
@item_field_options
def edit(document_id: str | None, item_id: str, **values) -> None:
    """Update fields of ITEM_ID."""
    if all(v is None for v in values.values()):
        raise click.UsageError("Nothing to change: pass at least one field option.")
    with open_api() as api:
        payload = _fields(values)
        doc_id = resolve_document_id(api, document_id)
        document = api.apply_item_operation(
            doc_id, Edit(target_id=item_id, payload=payload)
        )

    updated = find_item(document.items, item_id)
    if updated is None:
        _report_noop("edit", item_id)
        return
    click.echo(
        f"✓ {updated.part_code or updated.id}: total price "
        f"{fmt_money(updated.total_price)}; document total "
        f"{fmt_money(document.total_cost)}"
    )


@item.command("delete")
@_doc_option
@click.argument("item_id")
def delete(document_id: str | None, item_id: str) -> None:
    """Delete ITEM_ID together with all of its sub-items."""
    with open_api() as api:
        doc_id = resolve_document_id(api, document_id)
        before = count_items(api.read_tree(doc_id).items)
        document = api.apply_item_operation(doc_id, Delete(target_id=item_id))

    if count_items(document.items) == before:
        _report_noop("delete", item_id)
        return
    click.echo(f"✓ Deleted {item_id}; total cost {fmt_money(document.total_cost)}")


@item.command("toggle")
@_doc_option
@click.argument("item_id")
def toggle(document_id: str | None, item_id: str) -> None:
    """Expand or collapse ITEM_ID in tree views."""
    with open_api() as api:
        doc_id = resolve_document_id(api, document_id)
        document = api.apply_item_operation(doc_id, ToggleExpand(target_id=item_id))

    toggled = find_item(document.items, item_id)
    if toggled is None:
        _report_noop("toggle", item_id)
        return
    state = "expanded" if toggled.is_expanded else "collapsed"
    click.echo(f"✓ {toggled.part_code or toggled.id} {state}")
