from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_UNIT = "EA"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PartType(str, Enum):
    """How a part is consumed over the equipment's life."""

    CONSUMABLE = "consumable"
    REPLACEMENT = "replacement"
    SPARE = "spare"
    STANDARD = "standard"


class BOMItem(BaseModel):
    """A single node in a BOM tree.

    ``total_price`` and ``level`` are derived by the engine: callers never set
    them through an item payload. Each node exclusively owns ``children``.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(..., description="Identifier, unique within its document.")

    # descriptive fields
    part_code: str = Field("", description="Part code (e.g. 'BRG-01').")
    part_name: str = Field("", description="Human readable part name.")
    specification: str = Field("", description="Free-text specification.")
    manufacturer: str = Field("", description="Manufacturer name.")
    model: str = Field("", description="Manufacturer model number.")
    supplier: str = Field("", description="Preferred supplier.")
    remarks: str = Field("", description="Free-text remarks.")
    part_type: PartType = Field(PartType.STANDARD, description="Part category.")
    unit: str = Field(DEFAULT_UNIT, description="Unit of measure.")

    # quantities and prices
    quantity: float = Field(1, ge=0, description="Quantity per parent assembly.")
    unit_price: float = Field(0, ge=0, description="Price of one unit.")
    total_price: float = Field(
        0, ge=0, description="Derived: quantity × unit_price."
    )

    # procurement / inventory hints
    lead_time: float = Field(0, ge=0, description="Procurement lead time in days.")
    min_stock: float = Field(0, ge=0, description="Minimum stock to keep.")
    current_stock: float = Field(0, ge=0, description="Stock currently on hand.")

    # structure
    level: int = Field(1, ge=1, description="Depth in the tree; roots are 1.")
    parent_id: str | None = Field(None, description="Id of the owning node.")
    is_expanded: bool = Field(False, description="Display state only.")
    children: list["BOMItem"] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_low_stock(self) -> bool:
        """True when stock on hand has fallen below the minimum."""
        return self.current_stock < self.min_stock

    @property
    def has_children(self) -> bool:
        return bool(self.children)


class ItemFields(BaseModel):
    """Partial item payload accepted by add and edit operations.

    Only fields a caller may set are present; the derived and structural
    fields (``id``, ``level``, ``total_price``, ``parent_id``, ``children``)
    are rejected along with any unknown key.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    part_code: str | None = None
    part_name: str | None = None
    specification: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    supplier: str | None = None
    remarks: str | None = None
    part_type: PartType | None = None
    unit: str | None = None
    quantity: float | None = Field(None, ge=0)
    unit_price: float | None = Field(None, ge=0)
    lead_time: float | None = Field(None, ge=0)
    min_stock: float | None = Field(None, ge=0)
    current_stock: float | None = Field(None, ge=0)
    is_expanded: bool | None = None

    def supplied(self) -> dict:
        """The fields the caller actually set, ignoring explicit ``None``."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
