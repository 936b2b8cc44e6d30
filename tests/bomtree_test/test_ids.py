"""Unit tests for identifier generation."""

import re

from bomtree.utils.ids import DOCUMENT_PREFIX, ITEM_PREFIX, new_id


def test_new_id_format():
    """Ids are prefix, millisecond timestamp and a base-36 suffix."""
    assert re.fullmatch(r"bom-item-\d{13}-[0-9a-z]{5}", new_id(ITEM_PREFIX))


def test_new_id_uses_prefix():
    assert new_id(DOCUMENT_PREFIX).startswith("eq-bom-")
    assert new_id("custom").startswith("custom-")


def test_new_ids_are_unique():
    ids = {new_id() for _ in range(1000)}
    assert len(ids) == 1000
