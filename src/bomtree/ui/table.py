"""Table rendering for BOM documents using rich."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table as RichTable

from bomtree.models.document import BOMDocument
from bomtree.models.item import BOMItem


def fmt_money(value: float) -> str:
    return f"{value:,.2f}"


def fmt_qty(value: float) -> str:
    return f"{value:g}"


def _marker(item: BOMItem) -> str:
    if not item.has_children:
        return " "
    return "▾" if item.is_expanded else "▸"


class _RichRenderable:
    """Shared render/to_string for the table classes below."""

    def _build_rich_table(self) -> RichTable:
        raise NotImplementedError

    def render(self) -> None:
        """Render the table to the console."""
        Console().print(self._build_rich_table())

    def to_string(self) -> str:
        """Return the table as a string (useful for testing)."""
        console = Console(width=160)
        with console.capture() as capture:
            console.print(self._build_rich_table())
        return capture.get()


class BOMTreeTable(_RichRenderable):
    """One document's item tree, indented by level.

    Children of collapsed nodes are hidden unless ``expand_all`` is set.
    Rows below their minimum stock are highlighted.
    """

    def __init__(self, document: BOMDocument, expand_all: bool = False):
        self.document = document
        self.expand_all = expand_all

    def visible_items(self) -> list[BOMItem]:
        rows: list[BOMItem] = []

        def visit(items: Sequence[BOMItem]) -> None:
            for item in items:
                rows.append(item)
                if self.expand_all or item.is_expanded:
                    visit(item.children)

        visit(self.document.items)
        return rows

    def _build_rich_table(self) -> RichTable:
        doc = self.document
        table = RichTable(
            title=(
                f"{doc.equipment_code} – {doc.equipment_name} "
                f"({doc.version}, {doc.status.value}) | "
                f"total cost {fmt_money(doc.total_cost)}"
            ),
            show_header=True,
        )
        table.add_column("Part Code", style="bold cyan", no_wrap=True)
        table.add_column("Part Name")
        table.add_column("Type", style="yellow")
        table.add_column("Qty", justify="right")
        table.add_column("Unit Price", justify="right")
        table.add_column("Total", justify="right", style="green")
        table.add_column("Stock", justify="right")
        table.add_column("Id", style="dim")

        for item in self.visible_items():
            indent = "  " * (item.level - 1)
            table.add_row(
                f"{indent}{_marker(item)} {item.part_code}",
                item.part_name,
                item.part_type.value,
                f"{fmt_qty(item.quantity)} {item.unit}",
                fmt_money(item.unit_price),
                fmt_money(item.total_price),
                f"{fmt_qty(item.current_stock)}/{fmt_qty(item.min_stock)}",
                item.id,
                style="red" if item.is_low_stock else None,
            )
        return table


class DocumentListTable(_RichRenderable):
    """Summary row per document; the selected one is marked."""

    def __init__(
        self, documents: Sequence[BOMDocument], selected_id: str | None = None
    ):
        self.documents = list(documents)
        self.selected_id = selected_id

    def _build_rich_table(self) -> RichTable:
        table = RichTable(title=f"BOM documents ({len(self.documents)})")
        table.add_column("", no_wrap=True)
        table.add_column("Id", style="dim", no_wrap=True)
        table.add_column("Equipment Code", style="bold cyan")
        table.add_column("Equipment Name")
        table.add_column("Version")
        table.add_column("Status", style="yellow")
        table.add_column("Items", justify="right")
        table.add_column("Total Cost", justify="right", style="green")

        for doc in self.documents:
            table.add_row(
                "*" if doc.id == self.selected_id else "",
                doc.id,
                doc.equipment_code,
                doc.equipment_name,
                doc.version,
                doc.status.value,
                str(len(doc.items)),
                fmt_money(doc.total_cost),
            )
        return table
