"""Data models for BOM documents and their item trees."""

from bomtree.models.document import (
    BOMDocument,
    BOMSearchFilters,
    BOMStatus,
    BOMTemplate,
    EquipmentRef,
)
from bomtree.models.item import DEFAULT_UNIT, BOMItem, ItemFields, PartType

__all__ = [
    "DEFAULT_UNIT",
    "BOMDocument",
    "BOMItem",
    "BOMSearchFilters",
    "BOMStatus",
    "BOMTemplate",
    "EquipmentRef",
    "ItemFields",
    "PartType",
]
