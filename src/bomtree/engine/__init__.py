"""The BOM tree engine: operations, mutation, cost rollup and the store."""

from bomtree.engine.cost import item_price, tree_cost
from bomtree.engine.mutator import MutationResult, apply_operation
from bomtree.engine.operations import (
    Add,
    Delete,
    Edit,
    Operation,
    ToggleExpand,
    parse_operation,
)
from bomtree.engine.store import BOMDocumentStore
from bomtree.engine.traversal import count_items, find_item, walk

__all__ = [
    # Cost
    "item_price",
    "tree_cost",
    # Operations
    "Add",
    "Delete",
    "Edit",
    "Operation",
    "ToggleExpand",
    "parse_operation",
    # Mutation
    "MutationResult",
    "apply_operation",
    # Store
    "BOMDocumentStore",
    # Traversal
    "count_items",
    "find_item",
    "walk",
]
