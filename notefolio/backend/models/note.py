"""
Note Model.

A note lives in exactly one group and carries zero or more categories
through the note_categories join table. A note has no owner column of
its own; its owner is always its group's user.
"""

import enum

from sqlalchemy import Enum, ForeignKey, String, Text, func, select
from sqlalchemy.orm import Mapped, column_property, mapped_column, relationship

from notefolio.backend.models.base import Base, TimestampMixin, UUIDMixin
from notefolio.backend.models.category import Category
from notefolio.backend.models.group import Group


class NoteStatus(str, enum.Enum):
    """
    Lifecycle states of a note.

    archive/unarchive move between ACTIVE and ARCHIVED. TRASHED is a
    valid stored value but no dedicated operation produces it.
    """

    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    TRASHED = "TRASHED"


class Note(UUIDMixin, TimestampMixin, Base):
    """Note database model."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    status: Mapped[NoteStatus] = mapped_column(
        Enum(NoteStatus, name="note_status"),
        default=NoteStatus.ACTIVE,
        nullable=False,
        index=True,
    )
    group_id: Mapped[str] = mapped_column(
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    group: Mapped[Group] = relationship(back_populates="notes")
    category_links: Mapped[list["NoteCategory"]] = relationship(
        back_populates="note",
        cascade="all, delete-orphan",
    )

    @property
    def categories(self) -> list[Category]:
        """Categories attached to this note."""
        return [link.category for link in self.category_links]

    @property
    def category_ids(self) -> set[str]:
        return {link.category_id for link in self.category_links}

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, status={self.status})>"


class NoteCategory(Base):
    """Join row between a note and a category."""

    __tablename__ = "note_categories"

    note_id: Mapped[str] = mapped_column(
        ForeignKey("notes.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[str] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    note: Mapped[Note] = relationship(back_populates="category_links")
    category: Mapped[Category] = relationship(back_populates="note_links")

    def __repr__(self) -> str:
        return f"<NoteCategory(note_id={self.note_id}, category_id={self.category_id})>"


# Note counts, loaded with every Group/Category row
Group.note_count = column_property(
    select(func.count(Note.id))
    .where(Note.group_id == Group.id)
    .correlate_except(Note)
    .scalar_subquery()
)

Category.note_count = column_property(
    select(func.count(NoteCategory.note_id))
    .where(NoteCategory.category_id == Category.id)
    .correlate_except(NoteCategory)
    .scalar_subquery()
)
