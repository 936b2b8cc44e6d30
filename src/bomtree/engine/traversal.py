"""Read-only walks over an item forest."""

from collections.abc import Iterator, Sequence

from bomtree.models.item import BOMItem


def walk(items: Sequence[BOMItem]) -> Iterator[BOMItem]:
    """Yield every node depth-first, parents before their children."""
    for item in items:
        yield item
        yield from walk(item.children)


def find_item(items: Sequence[BOMItem], item_id: str) -> BOMItem | None:
    """Return the first node with ``item_id`` in depth-first order."""
    for item in walk(items):
        if item.id == item_id:
            return item
    return None


def count_items(items: Sequence[BOMItem]) -> int:
    return sum(1 for _ in walk(items))
