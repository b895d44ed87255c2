"""
Group Model.

A user-owned folder of notes. Deleting a group deletes its notes.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notefolio.backend.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from notefolio.backend.models.note import Note
    from notefolio.backend.models.user import User


class Group(UUIDMixin, TimestampMixin, Base):
    """
    Group database model.

    `note_count` is attached as a correlated column property in
    models/note.py once Note is mapped.
    """

    __tablename__ = "groups"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship(back_populates="groups")
    notes: Mapped[list["Note"]] = relationship(
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="Note.created_at.desc()",
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name!r})>"
