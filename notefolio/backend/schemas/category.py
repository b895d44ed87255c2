"""
Category Schemas.

Pydantic schemas for category API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notefolio.backend.schemas.note import NoteInCategoryResponse

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(BaseModel):
    """Schema for creating a new category."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Category name, unique per user",
        examples=["Personal"],
    )
    color: str | None = Field(
        default=None,
        pattern=HEX_COLOR_PATTERN,
        description="Hex color such as #FF5733",
        examples=["#FF5733"],
    )


class CategoryUpdate(BaseModel):
    """Schema for updating an existing category."""

    name: str | None = Field(
        default=None,
        min_length=1,
        max_length=50,
        description="Category name, unique per user",
    )
    color: str | None = Field(
        default=None,
        pattern=HEX_COLOR_PATTERN,
        description="Hex color such as #FF5733",
    )


class CategoryResponse(BaseModel):
    """Schema for category in API responses."""

    id: str = Field(description="Category unique identifier")
    name: str = Field(description="Category name")
    color: str | None = Field(default=None, description="Hex color")
    user_id: str = Field(description="Owner")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    note_count: int = Field(default=0, description="Number of notes tagged")

    model_config = ConfigDict(from_attributes=True)


class CategoryDetailResponse(CategoryResponse):
    """Category with the notes tagged by it."""

    notes: list[NoteInCategoryResponse] = Field(default_factory=list)
