# Importing every model registers it on Base.metadata and lets
# string relationship targets ("Note", "Group", ...) resolve.
from notefolio.backend.models.base import Base
from notefolio.backend.models.category import Category
from notefolio.backend.models.group import Group
from notefolio.backend.models.note import Note, NoteCategory, NoteStatus
from notefolio.backend.models.user import User

__all__ = [
    "Base",
    "Category",
    "Group",
    "Note",
    "NoteCategory",
    "NoteStatus",
    "User",
]
