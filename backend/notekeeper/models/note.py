"""
NoteKeeper Backend — Note SQLAlchemy Model
============================================

What:  ORM model for the `notes` table.
How:   `notes(id INTEGER PK AUTOINCREMENT, user_id INTEGER, note TEXT)`.

Table Design:
    - id: store-assigned, never reused (SQLite AUTOINCREMENT), unique across users
    - user_id: owner of the note; plain integer, no foreign key, so deleting a
      user leaves their notes in place
    - note: free text body

    Index on user_id backs the only read path: "all notes of one owner".
"""

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.database import Base


class Note(Base):
    """A text note owned by one user."""

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Exposed in the domain as the note's owner id; column name kept as user_id.
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)

    note: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, user_id={self.user_id})>"
