"""Flat tabular export of a BOM tree."""

import csv
from collections.abc import Sequence

from pydantic import BaseModel

from bomtree.engine.traversal import walk
from bomtree.models.document import BOMDocument
from bomtree.models.item import BOMItem, PartType

# Spreadsheet applications need the byte-order mark to detect UTF-8.
CSV_ENCODING = "utf-8-sig"

CSV_HEADERS = [
    "Level",
    "Id",
    "Parent Id",
    "Part Code",
    "Part Name",
    "Specification",
    "Part Type",
    "Unit",
    "Quantity",
    "Unit Price",
    "Total Price",
    "Manufacturer",
    "Model",
    "Supplier",
    "Lead Time",
    "Min Stock",
    "Current Stock",
    "Remarks",
]


class FlatRow(BaseModel):
    """One node of the tree as a table row (children omitted)."""

    level: int
    id: str
    parent_id: str | None
    part_code: str
    part_name: str
    specification: str
    part_type: PartType
    unit: str
    quantity: float
    unit_price: float
    total_price: float
    manufacturer: str
    model: str
    supplier: str
    lead_time: float
    min_stock: float
    current_stock: float
    remarks: str

    @classmethod
    def from_item(cls, item: BOMItem) -> "FlatRow":
        return cls(**item.model_dump(include=set(cls.model_fields)))

    def as_row(self) -> list:
        return [
            self.level,
            self.id,
            self.parent_id or "",
            self.part_code,
            self.part_name,
            self.specification,
            self.part_type.value,
            self.unit,
            self.quantity,
            self.unit_price,
            self.total_price,
            self.manufacturer,
            self.model,
            self.supplier,
            self.lead_time,
            self.min_stock,
            self.current_stock,
            self.remarks,
        ]


def flatten(items: Sequence[BOMItem]) -> list[FlatRow]:
    """Depth-first rows, each parent immediately followed by its subtree."""
    return [FlatRow.from_item(item) for item in walk(items)]


def write_csv(document: BOMDocument, filename: str) -> int:
    """Write the document's tree as a flat CSV; returns the row count."""
    rows = flatten(document.items)
    with open(filename, mode="w", newline="", encoding=CSV_ENCODING) as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADERS)
        for row in rows:
            writer.writerow(row.as_row())
    return len(rows)
