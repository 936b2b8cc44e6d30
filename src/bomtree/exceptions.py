"""Errors raised by the BOM engine."""

from typing import Any


class BOMError(Exception):
    """Base class for all engine errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "BOM_ERROR"
        self.details = details or {}


class DocumentNotFoundError(BOMError, LookupError):
    """Raised when an operation references an unknown document id."""

    def __init__(self, document_id: str):
        super().__init__(
            message=f"BOM document '{document_id}' not found",
            code="DOCUMENT_NOT_FOUND",
            details={"document_id": document_id},
        )
        self.document_id = document_id


class NodeNotFoundError(BOMError, LookupError):
    """Raised in strict mode when an item operation targets a missing node."""

    def __init__(self, document_id: str, node_id: str):
        super().__init__(
            message=f"BOM item '{node_id}' not found in document '{document_id}'",
            code="NODE_NOT_FOUND",
            details={"document_id": document_id, "node_id": node_id},
        )
        self.document_id = document_id
        self.node_id = node_id
