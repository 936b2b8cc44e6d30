"""Shared fixtures and factories for BOM engine tests."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from bomtree.engine.store import BOMDocumentStore
from bomtree.engine.traversal import walk
from bomtree.models.document import BOMDocument, EquipmentRef
from bomtree.models.item import BOMItem, ItemFields

# ---------------------------------------------------------------------------
# Factories / Builders
# ---------------------------------------------------------------------------

T0 = datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)


def sequential_ids(prefix: str = "item"):
    """Id factory yielding item-1, item-2, ... for deterministic trees."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


class TickingClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = T0):
        self.current = start

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


def make_item(
    id: str = "item-1",
    quantity: float = 1,
    unit_price: float = 0,
    level: int = 1,
    children: list[BOMItem] | None = None,
    **kwargs,
) -> BOMItem:
    """Factory for BOMItem with a consistent total_price."""
    return BOMItem(
        id=id,
        quantity=quantity,
        unit_price=unit_price,
        total_price=quantity * unit_price,
        level=level,
        children=children or [],
        part_code=kwargs.get("part_code", id.upper()),
        part_name=kwargs.get("part_name", ""),
        manufacturer=kwargs.get("manufacturer", ""),
        part_type=kwargs.get("part_type", "standard"),
        parent_id=kwargs.get("parent_id"),
        is_expanded=kwargs.get("is_expanded", False),
        min_stock=kwargs.get("min_stock", 0),
        current_stock=kwargs.get("current_stock", 0),
    )


def make_tree() -> list[BOMItem]:
    """Two roots; the first has a child with one grandchild.

    motor (1 × 5000)
      bearing (2 × 150)
        ball (16 × 2)
      seal (2 × 25)
    frame (1 × 800)
    """
    ball = make_item("ball", 16, 2, level=3, parent_id="bearing")
    bearing = make_item("bearing", 2, 150, level=2, parent_id="motor", children=[ball])
    seal = make_item("seal", 2, 25, level=2, parent_id="motor")
    motor = make_item("motor", 1, 5000, children=[bearing, seal])
    frame = make_item("frame", 1, 800)
    return [motor, frame]


TREE_COST = 5000 + 300 + 32 + 50 + 800


def make_equipment(
    code: str = "EQ-PUMP-01", name: str = "Cooling pump"
) -> EquipmentRef:
    return EquipmentRef(id=f"eq-{code.lower()}", code=code, name=name)


def make_store(**kwargs) -> BOMDocumentStore:
    """Store with deterministic ids and a ticking clock."""
    return BOMDocumentStore(
        id_factory=kwargs.get("id_factory", sequential_ids("item")),
        document_id_factory=kwargs.get("document_id_factory", sequential_ids("doc")),
        clock=kwargs.get("clock", TickingClock()),
    )


def payload(**fields) -> ItemFields:
    return ItemFields(**fields)


def snapshot(items: list[BOMItem]) -> list[dict]:
    """Plain-data copy of a forest, for deep-equality checks."""
    return [item.model_dump() for item in items]


def assert_tree_invariants(document: BOMDocument) -> None:
    """Derived price, rollup and level invariants hold for every node."""
    total = 0.0
    for item in walk(document.items):
        assert item.total_price == item.quantity * item.unit_price
        total += item.total_price
        for child in item.children:
            assert child.level == item.level + 1
            assert child.parent_id == item.id
    for root in document.items:
        assert root.level == 1
    assert document.total_cost == total


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> BOMDocumentStore:
    return make_store()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME (config and store) at a temporary directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("BOMTREE_STORE_FILE", raising=False)
    monkeypatch.delenv("BOMTREE_STRICT", raising=False)
    return tmp_path
