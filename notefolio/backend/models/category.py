"""
Category Model.

A user-owned tag with an optional color. Names are unique per user.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from notefolio.backend.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from notefolio.backend.models.note import Note, NoteCategory
    from notefolio.backend.models.user import User


class Category(UUIDMixin, TimestampMixin, Base):
    """Category database model."""

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_categories_user_name"),
    )

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    color: Mapped[str | None] = mapped_column(
        String(7),
        nullable=True,
    )
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship(back_populates="categories")
    note_links: Mapped[list["NoteCategory"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
    )

    @property
    def notes(self) -> list["Note"]:
        """Notes tagged with this category."""
        return [link.note for link in self.note_links]

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name!r})>"
