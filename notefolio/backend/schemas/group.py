"""
Group Schemas.

Pydantic schemas for group API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notefolio.backend.schemas.note import NoteInGroupResponse


class GroupCreate(BaseModel):
    """Schema for creating a new group."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Group name",
        examples=["Work"],
    )


class GroupUpdate(BaseModel):
    """Schema for updating an existing group."""

    name: str | None = Field(
        default=None,
        min_length=1,
        max_length=100,
        description="Group name",
    )


class GroupResponse(BaseModel):
    """Schema for group in API responses."""

    id: str = Field(description="Group unique identifier")
    name: str = Field(description="Group name")
    user_id: str = Field(description="Owner")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    note_count: int = Field(default=0, description="Number of notes in the group")

    model_config = ConfigDict(from_attributes=True)


class GroupDetailResponse(GroupResponse):
    """Group with its notes, newest first."""

    notes: list[NoteInGroupResponse] = Field(default_factory=list)
