"""Pure transforms from one item forest to the next.

:func:`apply_operation` walks the forest once, depth-first, applies the
operation at the first node whose id matches and rebuilds every other node
as-is. The input forest is never modified: every node of the result is a new
object with a new ``children`` list.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from bomtree.engine.cost import item_price
from bomtree.engine.operations import Add, Delete, Edit, ToggleExpand
from bomtree.models.item import BOMItem, utcnow
from bomtree.utils.ids import ITEM_PREFIX, new_id

IdFactory = Callable[[], str]


def _default_id_factory() -> str:
    return new_id(ITEM_PREFIX)


@dataclass
class MutationResult:
    """Forest produced by an operation and whether its target was found."""

    items: list[BOMItem]
    matched: bool


def new_item(
    op: Add,
    *,
    level: int,
    parent_id: str | None,
    id_factory: IdFactory,
    now: datetime,
) -> BOMItem:
    """Build a fresh node from an add payload, filling in defaults."""
    fields = op.payload.supplied()
    item = BOMItem(
        id=id_factory(),
        level=level,
        parent_id=parent_id,
        created_at=now,
        updated_at=now,
        **fields,
    )
    item.total_price = item_price(item.quantity, item.unit_price)
    return item


def _copy(item: BOMItem, children: list[BOMItem], **update) -> BOMItem:
    return item.model_copy(update={"children": children, **update})


class _Walker:
    """Single-use depth-first rebuild of a forest for one operation."""

    def __init__(
        self,
        op: Add | Edit | Delete | ToggleExpand,
        id_factory: IdFactory,
        now: datetime,
    ):
        self.op = op
        self.id_factory = id_factory
        self.now = now
        self.matched = False

    def rebuild(self, items: Sequence[BOMItem]) -> list[BOMItem]:
        result: list[BOMItem] = []
        for item in items:
            if not self.matched and item.id == self.op.target_id:
                self.matched = True
                replacement = self._apply(item)
                if replacement is not None:
                    result.append(replacement)
            else:
                result.append(_copy(item, self.rebuild(item.children)))
        return result

    def _apply(self, item: BOMItem) -> BOMItem | None:
        op = self.op
        if isinstance(op, Delete):
            return None
        if isinstance(op, ToggleExpand):
            return _copy(
                item, _clone_all(item.children), is_expanded=not item.is_expanded
            )
        if isinstance(op, Edit):
            merged = {**op.payload.supplied(), "updated_at": self.now}
            edited = _copy(item, _clone_all(item.children), **merged)
            edited.total_price = item_price(edited.quantity, edited.unit_price)
            return edited
        if isinstance(op, Add):
            child = new_item(
                op,
                level=item.level + 1,
                parent_id=item.id,
                id_factory=self.id_factory,
                now=self.now,
            )
            return _copy(item, _clone_all(item.children) + [child])
        raise TypeError(f"Unsupported operation: {type(op).__name__}")


def _clone_all(items: Sequence[BOMItem]) -> list[BOMItem]:
    return [_copy(item, _clone_all(item.children)) for item in items]


def apply_operation(
    items: Sequence[BOMItem],
    op: Add | Edit | Delete | ToggleExpand,
    *,
    id_factory: IdFactory | None = None,
    now: datetime | None = None,
) -> MutationResult:
    """Apply ``op`` to ``items`` and return the rebuilt forest.

    A root-level add always succeeds. Any other operation whose target (or
    parent, for add) is missing returns a forest equal to the input with
    ``matched=False``. When ids are duplicated the first node in depth-first
    order wins and no other node is touched.
    """
    id_factory = id_factory or _default_id_factory
    now = now or utcnow()

    if isinstance(op, Add) and op.parent_id is None:
        root = new_item(op, level=1, parent_id=None, id_factory=id_factory, now=now)
        return MutationResult(items=_clone_all(items) + [root], matched=True)

    walker = _Walker(op, id_factory, now)
    rebuilt = walker.rebuild(items)
    return MutationResult(items=rebuilt, matched=walker.matched)
