"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from notefolio.backend.api.v1.endpoints import auth, categories, groups, notes, users

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(groups.router, prefix="/groups", tags=["groups"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
