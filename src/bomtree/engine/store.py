"""In-memory collection of BOM documents with a current selection."""

from collections.abc import Callable
from datetime import datetime

from bomtree import logger
from bomtree.engine.cost import tree_cost
from bomtree.engine.mutator import IdFactory, apply_operation
from bomtree.engine.operations import Add, Delete, Edit, ToggleExpand
from bomtree.engine.templates import instantiate_template, normalize_items
from bomtree.engine.traversal import walk
from bomtree.exceptions import DocumentNotFoundError, NodeNotFoundError
from bomtree.models.document import (
    BOMDocument,
    BOMSearchFilters,
    BOMStatus,
    BOMTemplate,
    EquipmentRef,
)
from bomtree.models.item import utcnow
from bomtree.utils.ids import DOCUMENT_PREFIX, ITEM_PREFIX, new_id


def _contains(haystack: str, needle: str | None) -> bool:
    return needle is None or needle.lower() in haystack.lower()


def matches_filters(document: BOMDocument, filters: BOMSearchFilters) -> bool:
    """Whether ``document`` satisfies every criterion set on ``filters``."""
    if filters.status is not None and document.status != filters.status:
        return False
    if not _contains(document.equipment_code, filters.equipment_code):
        return False
    if not _contains(document.equipment_name, filters.equipment_name):
        return False

    item_filters = (
        filters.part_code,
        filters.part_name,
        filters.manufacturer,
        filters.part_type,
    )
    if all(f is None for f in item_filters):
        return True
    return any(
        _contains(item.part_code, filters.part_code)
        and _contains(item.part_name, filters.part_name)
        and _contains(item.manufacturer, filters.manufacturer)
        and (filters.part_type is None or item.part_type == filters.part_type)
        for item in walk(document.items)
    )


def _ingest(document: BOMDocument) -> BOMDocument:
    """Copy of ``document`` with every derived value recomputed."""
    items = normalize_items(document.items)
    total_cost = tree_cost(items)
    if total_cost != document.total_cost:
        logger.warning(
            f"Document {document.id}: stored total_cost {document.total_cost} "
            f"does not match its items; using {total_cost}"
        )
    return document.model_copy(update={"items": items, "total_cost": total_cost})


class BOMDocumentStore:
    """Holds BOM documents and keeps each one's ``total_cost`` current.

    Documents handed out are deep copies; the store's own state only changes
    through its methods. Not thread-safe on its own: see
    :class:`bomtree.api.BOMDocumentAPI` for per-document serialization.
    """

    def __init__(
        self,
        documents: list[BOMDocument] | None = None,
        selected_id: str | None = None,
        *,
        id_factory: IdFactory | None = None,
        document_id_factory: IdFactory | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._documents: dict[str, BOMDocument] = {}
        for document in documents or []:
            self._documents[document.id] = _ingest(document)
        self._selected_id = selected_id if selected_id in self._documents else None
        self._id_factory = id_factory or (lambda: new_id(ITEM_PREFIX))
        self._document_id_factory = document_id_factory or (
            lambda: new_id(DOCUMENT_PREFIX)
        )
        self._clock = clock

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------

    def _get(self, document_id: str) -> BOMDocument:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def documents(self) -> list[BOMDocument]:
        """All documents, in creation order."""
        return [doc.model_copy(deep=True) for doc in self._documents.values()]

    @property
    def selected_id(self) -> str | None:
        """Id of the current document.

        Falls back to the first document when nothing has been selected yet.
        """
        if self._selected_id is not None:
            return self._selected_id
        return next(iter(self._documents), None)

    @property
    def selected(self) -> BOMDocument | None:
        selected_id = self.selected_id
        if selected_id is None:
            return None
        return self._documents[selected_id].model_copy(deep=True)

    def read_tree(self, document_id: str) -> BOMDocument:
        """Return a copy of the document; raises if it does not exist."""
        return self._get(document_id).model_copy(deep=True)

    def search(self, filters: BOMSearchFilters) -> list[BOMDocument]:
        return [
            doc.model_copy(deep=True)
            for doc in self._documents.values()
            if matches_filters(doc, filters)
        ]

    # -----------------------------------------------------------------------
    # Commands
    # -----------------------------------------------------------------------

    def create_document(
        self,
        equipment: EquipmentRef,
        *,
        version: str = "v1.0",
        created_by: str = "",
        template: BOMTemplate | None = None,
    ) -> BOMDocument:
        """Create a draft document, optionally seeded from a template, and
        select it."""
        now = self._clock()
        items = []
        if template is not None:
            items = instantiate_template(
                template.items, id_factory=self._id_factory, now=now
            )
        document = BOMDocument(
            id=self._document_id_factory(),
            equipment_id=equipment.id,
            equipment_code=equipment.code,
            equipment_name=equipment.name,
            version=version,
            status=BOMStatus.DRAFT,
            items=items,
            total_cost=tree_cost(items),
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        self._documents[document.id] = document
        self._selected_id = document.id
        logger.info(
            f"Created BOM document {document.id} for equipment {equipment.code}"
        )
        return document.model_copy(deep=True)

    def select_document(self, document_id: str) -> BOMDocument:
        document = self._get(document_id)
        self._selected_id = document_id
        logger.debug(f"Selected BOM document {document_id}")
        return document.model_copy(deep=True)

    def remove_document(self, document_id: str) -> None:
        self._get(document_id)
        del self._documents[document_id]
        if self._selected_id == document_id:
            self._selected_id = None
        logger.info(f"Removed BOM document {document_id}")

    def apply_item_operation(
        self,
        document_id: str,
        op: Add | Edit | Delete | ToggleExpand,
        *,
        strict: bool = False,
    ) -> BOMDocument:
        """Run ``op`` over the document's items and roll up its cost.

        A missing target node leaves the document untouched; with
        ``strict=True`` it raises :class:`NodeNotFoundError` instead.
        """
        document = self._get(document_id)
        now = self._clock()
        result = apply_operation(
            document.items, op, id_factory=self._id_factory, now=now
        )

        if not result.matched:
            logger.warning(
                f"{op.kind} on document {document_id}: "
                f"node {op.target_id} not found"
            )
            if strict:
                raise NodeNotFoundError(document_id, str(op.target_id))
            return document.model_copy(deep=True)

        updated = document.model_copy(
            update={
                "items": result.items,
                "total_cost": tree_cost(result.items),
                "updated_at": now,
            }
        )
        self._documents[document_id] = updated
        logger.debug(
            f"{op.kind} on document {document_id} "
            f"(target={op.target_id}): total_cost={updated.total_cost}"
        )
        return updated.model_copy(deep=True)

    def set_status(self, document_id: str, status: BOMStatus) -> BOMDocument:
        document = self._get(document_id)
        updated = document.model_copy(
            update={"status": status, "updated_at": self._clock()}
        )
        self._documents[document_id] = updated
        logger.debug(f"Document {document_id} status -> {status.value}")
        return updated.model_copy(deep=True)

    def approve(self, document_id: str, approved_by: str) -> BOMDocument:
        """Mark a document approved, recording who approved it and when."""
        document = self._get(document_id)
        now = self._clock()
        updated = document.model_copy(
            update={
                "status": BOMStatus.APPROVED,
                "approved_by": approved_by,
                "approved_at": now,
                "updated_at": now,
            }
        )
        self._documents[document_id] = updated
        logger.info(f"Document {document_id} approved by {approved_by}")
        return updated.model_copy(deep=True)
