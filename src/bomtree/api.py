"""Facade used by every caller of the engine (CLI, import jobs, views)."""

import threading
from pathlib import Path

from pydantic import BaseModel, Field

from bomtree import logger
from bomtree.engine.operations import Add, Delete, Edit, ToggleExpand
from bomtree.engine.store import BOMDocumentStore
from bomtree.exceptions import DocumentNotFoundError
from bomtree.models.document import (
    BOMDocument,
    BOMSearchFilters,
    BOMStatus,
    BOMTemplate,
    EquipmentRef,
)


class StoreSnapshot(BaseModel):
    """Serialized form of a store: its documents and current selection."""

    documents: list[BOMDocument] = Field(default_factory=list)
    selected_id: str | None = None


class BOMDocumentAPI:
    """Entry point for creating, selecting, mutating and reading documents.

    Operations on the same document are serialized with a per-document lock;
    operations on different documents do not contend.
    """

    def __init__(
        self, store: BOMDocumentStore | None = None, strict: bool = False
    ) -> None:
        self._store = store if store is not None else BOMDocumentStore()
        self._strict = strict
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, document_id: str) -> threading.Lock:
        """Lock guarding ``document_id``; unknown ids raise without one."""
        with self._locks_guard:
            if document_id not in self._store:
                raise DocumentNotFoundError(document_id)
            return self._locks.setdefault(document_id, threading.Lock())

    @property
    def store(self) -> BOMDocumentStore:
        return self._store

    @property
    def selected(self) -> BOMDocument | None:
        return self._store.selected

    @property
    def documents(self) -> list[BOMDocument]:
        return self._store.documents

    # -----------------------------------------------------------------------
    # Core operations
    # -----------------------------------------------------------------------

    def create_document(
        self,
        equipment: EquipmentRef,
        *,
        version: str = "v1.0",
        created_by: str = "",
        template: BOMTemplate | None = None,
    ) -> BOMDocument:
        with self._locks_guard:
            return self._store.create_document(
                equipment, version=version, created_by=created_by, template=template
            )

    def select_document(self, document_id: str) -> BOMDocument:
        return self._store.select_document(document_id)

    def apply_item_operation(
        self,
        document_id: str,
        op: Add | Edit | Delete | ToggleExpand,
        *,
        strict: bool | None = None,
    ) -> BOMDocument:
        strict = self._strict if strict is None else strict
        with self._lock_for(document_id):
            return self._store.apply_item_operation(document_id, op, strict=strict)

    def read_tree(self, document_id: str) -> BOMDocument:
        with self._lock_for(document_id):
            return self._store.read_tree(document_id)

    # -----------------------------------------------------------------------
    # Document management
    # -----------------------------------------------------------------------

    def remove_document(self, document_id: str) -> None:
        with self._lock_for(document_id):
            self._store.remove_document(document_id)
        with self._locks_guard:
            self._locks.pop(document_id, None)

    def approve(self, document_id: str, approved_by: str) -> BOMDocument:
        with self._lock_for(document_id):
            return self._store.approve(document_id, approved_by)

    def set_status(self, document_id: str, status: BOMStatus) -> BOMDocument:
        with self._lock_for(document_id):
            return self._store.set_status(document_id, status)

    def search(self, filters: BOMSearchFilters) -> list[BOMDocument]:
        return self._store.search(filters)

    # -----------------------------------------------------------------------
    # Persistence
    # -----------------------------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            documents=self._store.documents, selected_id=self._store.selected_id
        )

    def save(self, path: Path) -> None:
        """Write every document and the current selection to ``path`` as JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.snapshot().model_dump_json(indent=2), encoding="utf-8")
        logger.debug(f"Saved {len(self._store)} BOM document(s) to {path}")

    @classmethod
    def load(cls, path: Path, strict: bool = False) -> "BOMDocumentAPI":
        """Rebuild a facade from a file written by :meth:`save`.

        A missing file yields an empty store.
        """
        if not path.exists():
            logger.debug(f"No store file at {path}; starting empty")
            return cls(strict=strict)
        snapshot = StoreSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
        logger.debug(f"Loaded {len(snapshot.documents)} BOM document(s) from {path}")
        store = BOMDocumentStore(snapshot.documents, snapshot.selected_id)
        return cls(store, strict=strict)
