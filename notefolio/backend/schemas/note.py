"""
Note Schemas.

Pydantic schemas for note API request/response validation, plus the
compact group/category shapes embedded in note responses.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notefolio.backend.models.note import NoteStatus


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Note title",
        examples=["Groceries"],
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Note content",
        examples=["Milk, eggs, coffee"],
    )
    group_id: str = Field(
        ...,
        min_length=1,
        description="Group the note belongs to",
    )
    category_ids: list[str] | None = Field(
        default=None,
        description="Categories to tag the note with",
    )


class NoteUpdate(BaseModel):
    """
    Schema for updating an existing note.

    Only provided fields are applied. When category_ids is provided it
    replaces the note's whole category set; an empty list clears it.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=200,
        description="Note title",
    )
    content: str | None = Field(
        default=None,
        description="Note content",
    )
    status: NoteStatus | None = Field(
        default=None,
        description="Note status",
    )
    category_ids: list[str] | None = Field(
        default=None,
        description="Full replacement set of category ids",
    )


@dataclass
class NoteFilter:
    """Optional filters for listing notes, combined with AND."""

    status: NoteStatus | None = None
    group_id: str | None = None
    category_id: str | None = None


class CategorySummary(BaseModel):
    """Category as embedded in a note."""

    id: str
    name: str
    color: str | None = None

    model_config = ConfigDict(from_attributes=True)


class GroupSummary(BaseModel):
    """Group as embedded in a note."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    status: NoteStatus = Field(description="Note status")
    group_id: str = Field(description="Owning group")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    categories: list[CategorySummary] = Field(default_factory=list)
    group: GroupSummary

    model_config = ConfigDict(from_attributes=True)


class NoteInGroupResponse(BaseModel):
    """Note as listed inside a group, with its categories."""

    id: str
    title: str
    content: str
    status: NoteStatus
    created_at: datetime
    updated_at: datetime
    categories: list[CategorySummary] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class NoteInCategoryResponse(BaseModel):
    """Note as listed inside a category, with its group."""

    id: str
    title: str
    content: str
    status: NoteStatus
    group_id: str
    created_at: datetime
    updated_at: datetime
    group: GroupSummary

    model_config = ConfigDict(from_attributes=True)
