from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from bomtree.models.item import BOMItem, PartType, utcnow


class BOMStatus(str, Enum):
    """Lifecycle status of a BOM document."""

    DRAFT = "draft"
    APPROVED = "approved"
    ACTIVE = "active"
    OBSOLETE = "obsolete"


class EquipmentRef(BaseModel):
    """Read-only reference to the equipment a BOM describes."""

    id: str = Field(..., description="Equipment id in the equipment registry.")
    code: str = Field(..., description="Equipment code (e.g. 'EQ-PUMP-01').")
    name: str = Field("", description="Equipment display name.")


class BOMDocument(BaseModel):
    """A bill of materials for one piece of equipment.

    ``total_cost`` is owned by the store: it is recomputed from ``items``
    after every mutation and must not be set directly.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    equipment_id: str
    equipment_code: str
    equipment_name: str = ""
    version: str = Field("v1.0", description="Free-text version label.")
    status: BOMStatus = BOMStatus.DRAFT
    items: list[BOMItem] = Field(
        default_factory=list, description="Top-level items, in insertion order."
    )
    total_cost: float = Field(0, description="Sum of total_price over all nodes.")

    created_by: str = ""
    approved_by: str | None = None
    approved_at: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class BOMTemplate(BaseModel):
    """A reusable item forest for a type of equipment."""

    id: str
    template_name: str
    equipment_type: str = ""
    description: str = ""
    items: list[BOMItem] = Field(default_factory=list)
    is_active: bool = True
    created_by: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class BOMSearchFilters(BaseModel):
    """Criteria for searching documents.

    Text criteria are case-insensitive substring matches. Item criteria match
    a document when any node at any depth matches; all supplied criteria must
    hold.
    """

    equipment_code: str | None = None
    equipment_name: str | None = None
    part_code: str | None = None
    part_name: str | None = None
    part_type: PartType | None = None
    status: BOMStatus | None = None
    manufacturer: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)
