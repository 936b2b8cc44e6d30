"""Price and cost rollup calculations."""

from collections.abc import Sequence

from bomtree.engine.traversal import walk
from bomtree.models.item import BOMItem


def item_price(quantity: float, unit_price: float) -> float:
    """Price of one line: ``quantity × unit_price`` (no rounding)."""
    return quantity * unit_price


def tree_cost(items: Sequence[BOMItem]) -> float:
    """Sum ``total_price`` over every node of the forest, at every depth."""
    return sum((item.total_price for item in walk(items)), 0.0)
