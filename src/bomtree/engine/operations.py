"""Item operations accepted by the tree mutator.

Each operation is a pydantic model tagged by ``kind`` so a raw mapping (for
example a JSON request body) can be validated straight into the right
variant with :data:`OPERATION_ADAPTER`.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from bomtree.models.item import ItemFields


class Add(BaseModel):
    """Append a new node under ``parent_id``, or as a root when it is None."""

    kind: Literal["add"] = "add"
    parent_id: str | None = None
    payload: ItemFields = Field(default_factory=ItemFields)

    @property
    def target_id(self) -> str | None:
        return self.parent_id


class Edit(BaseModel):
    """Merge ``payload`` into the node ``target_id``."""

    kind: Literal["edit"] = "edit"
    target_id: str
    payload: ItemFields


class Delete(BaseModel):
    """Remove the node ``target_id`` together with its subtree."""

    kind: Literal["delete"] = "delete"
    target_id: str


class ToggleExpand(BaseModel):
    """Flip the display-only ``is_expanded`` flag of ``target_id``."""

    kind: Literal["toggle_expand"] = "toggle_expand"
    target_id: str


Operation = Annotated[
    Union[Add, Edit, Delete, ToggleExpand], Field(discriminator="kind")
]

OPERATION_ADAPTER: TypeAdapter[Operation] = TypeAdapter(Operation)


def parse_operation(data: dict) -> Add | Edit | Delete | ToggleExpand:
    """Validate a raw mapping into one of the operation variants."""
    return OPERATION_ADAPTER.validate_python(data)
