"""Identifier generation for documents, templates and tree nodes."""

import secrets
import string
import time

ITEM_PREFIX = "bom-item"
DOCUMENT_PREFIX = "eq-bom"
TEMPLATE_PREFIX = "bom-tpl"

_ALPHABET = string.digits + string.ascii_lowercase


def _random_suffix(length: int = 5) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def new_id(prefix: str = ITEM_PREFIX) -> str:
    """Return ``<prefix>-<epoch ms>-<5 random base-36 chars>``.

    Unique within one process with very high probability; nothing is
    persisted between calls.
    """
    return f"{prefix}-{time.time_ns() // 1_000_000}-{_random_suffix()}"
