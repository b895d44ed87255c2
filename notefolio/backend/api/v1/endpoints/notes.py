"""
Notes API Endpoints.

REST API endpoints for note management. Every route acts on behalf of
the authenticated user.
"""

from fastapi import APIRouter, Depends, Query

from notefolio.backend.core.dependencies import CurrentUserId, DbSession
from notefolio.backend.models.note import NoteStatus
from notefolio.backend.schemas.base import ApiResponse, MessageResponse
from notefolio.backend.schemas.note import (
    NoteCreate,
    NoteFilter,
    NoteResponse,
    NoteUpdate,
)
from notefolio.backend.services.note import NoteService

router = APIRouter()


def get_note_filter(
    status: NoteStatus | None = Query(default=None, description="Exact status"),
    group_id: str | None = Query(default=None, description="Only notes in this group"),
    category_id: str | None = Query(
        default=None,
        description="Only notes tagged with this category",
    ),
) -> NoteFilter:
    """Collect the optional list filters from the query string."""
    return NoteFilter(status=status, group_id=group_id, category_id=category_id)


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
    description="Create a note in one of your groups, optionally tagged with categories.",
)
async def create_note(
    data: NoteCreate,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    service = NoteService(db)
    note = await service.create(user_id, data)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List notes",
    description="List your notes, most recently updated first. Filters combine with AND.",
)
async def list_notes(
    db: DbSession,
    user_id: CurrentUserId,
    filters: NoteFilter = Depends(get_note_filter),
) -> ApiResponse[list[NoteResponse]]:
    """List notes with optional filters."""
    service = NoteService(db)
    notes = await service.find_all(user_id, filters)
    return ApiResponse(data=[NoteResponse.model_validate(note) for note in notes])


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(
    note_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    service = NoteService(db)
    note = await service.find_one(note_id, user_id)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.patch(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Update a note",
    description=(
        "Update an existing note. Only provided fields are updated; "
        "category_ids, when provided, replaces the whole category set."
    ),
)
async def update_note(
    note_id: str,
    data: NoteUpdate,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[NoteResponse]:
    """Update a note."""
    service = NoteService(db)
    note = await service.update(note_id, user_id, data)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.delete(
    "/{note_id}",
    response_model=ApiResponse[MessageResponse],
    summary="Delete a note",
    description="Permanently delete a note.",
)
async def delete_note(
    note_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[MessageResponse]:
    """Delete a note."""
    service = NoteService(db)
    return ApiResponse(data=await service.remove(note_id, user_id))


@router.patch(
    "/{note_id}/archive",
    response_model=ApiResponse[NoteResponse],
    summary="Archive a note",
    description="Set the note's status to ARCHIVED.",
)
async def archive_note(
    note_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[NoteResponse]:
    """Archive a note."""
    service = NoteService(db)
    note = await service.archive(note_id, user_id)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.patch(
    "/{note_id}/unarchive",
    response_model=ApiResponse[NoteResponse],
    summary="Unarchive a note",
    description="Set the note's status back to ACTIVE.",
)
async def unarchive_note(
    note_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[NoteResponse]:
    """Unarchive a note."""
    service = NoteService(db)
    note = await service.unarchive(note_id, user_id)
    return ApiResponse(data=NoteResponse.model_validate(note))
