"""Request models for the HTTP interface."""

from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import BaseModel, Field, StringConstraints, model_validator

from ..core import MAX_DESCRIPTION_LENGTH, MAX_TRAVERSE_DEPTH, MIN_TRAVERSE_DEPTH, RelationshipType

Tag = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Description = Annotated[str, StringConstraints(strip_whitespace=True, max_length=MAX_DESCRIPTION_LENGTH)]


class _PartialUpdate(BaseModel):
    """Update body: at least one field, and supplied fields may not be null."""

    nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_fields(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class NodeCreateRequest(BaseModel):
    """Request to create a node."""
    title: str = Field(..., min_length=1, description="Concept title")
    summary: str = Field(..., min_length=1, description="Concept summary")
    tags: list[Tag] = Field(default_factory=list, description="Ordered tags")


class NodeUpdateRequest(_PartialUpdate):
    """Request to update a node. Omitted fields keep their values."""
    title: str | None = Field(None, min_length=1)
    summary: str | None = Field(None, min_length=1)
    tags: list[Tag] | None = None


class EdgeCreateRequest(BaseModel):
    """Request to create an edge."""
    type: RelationshipType = Field(..., description="Relationship type")
    description: Description | None = Field(None, description="Optional description")
    sourceId: UUID = Field(..., description="Source node ID")
    targetId: UUID = Field(..., description="Target node ID")

    def to_input(self) -> dict:
        data = {
            "type": self.type,
            "sourceId": str(self.sourceId),
            "targetId": str(self.targetId),
        }
        if self.description is not None:
            data["description"] = self.description
        return data


class EdgeUpdateRequest(_PartialUpdate):
    """Request to update an edge. A null description clears it."""
    nullable_fields: ClassVar[tuple[str, ...]] = ("description",)

    type: RelationshipType | None = None
    description: Description | None = None


class TraverseRequest(BaseModel):
    """Request for a bounded neighborhood expansion."""
    startId: UUID = Field(..., description="Start node ID")
    depth: int = Field(..., ge=MIN_TRAVERSE_DEPTH, le=MAX_TRAVERSE_DEPTH, strict=True)
