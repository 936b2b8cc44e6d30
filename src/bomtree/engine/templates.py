"""Re-deriving forests: template instantiation and document ingest."""

from collections.abc import Callable, Sequence
from datetime import datetime

from bomtree.engine.cost import item_price
from bomtree.engine.mutator import IdFactory
from bomtree.models.item import BOMItem


def _rederive(
    items: Sequence[BOMItem],
    level: int,
    parent_id: str | None,
    update: Callable[[BOMItem], dict],
) -> list[BOMItem]:
    result: list[BOMItem] = []
    for item in items:
        changes = update(item)
        item_id = changes.get("id", item.id)
        children = _rederive(item.children, level + 1, item_id, update)
        result.append(
            item.model_copy(
                update={
                    **changes,
                    "level": level,
                    "parent_id": parent_id,
                    "total_price": item_price(item.quantity, item.unit_price),
                    "children": children,
                }
            )
        )
    return result


def instantiate_template(
    items: Sequence[BOMItem],
    *,
    id_factory: IdFactory,
    now: datetime,
    level: int = 1,
    parent_id: str | None = None,
) -> list[BOMItem]:
    """Copy a template forest with fresh ids and re-derived structure.

    ``level``, ``parent_id`` and ``total_price`` are recomputed rather than
    trusted, so a hand-edited template cannot break the tree invariants.
    """
    return _rederive(
        items,
        level,
        parent_id,
        lambda item: {
            "id": id_factory(),
            "is_expanded": False,
            "created_at": now,
            "updated_at": now,
        },
    )


def normalize_items(items: Sequence[BOMItem]) -> list[BOMItem]:
    """Rebuild a stored forest with ``level``, ``parent_id`` and
    ``total_price`` recomputed. Ids, timestamps and display state are kept."""
    return _rederive(items, 1, None, lambda item: {})
