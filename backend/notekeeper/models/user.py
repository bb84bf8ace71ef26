"""
NoteKeeper Backend — User SQLAlchemy Model
============================================

What:  ORM model for the `users` table.
How:   `users(id INTEGER PK AUTOINCREMENT, name TEXT, email TEXT, password TEXT)`.

Email is the login key but carries no UNIQUE constraint: registering the
same address twice creates two rows, and lookups take the lowest id.
The `password` column stores a salted hash, never the submitted password.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.database import Base


class User(Base):
    """A registered account."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    email: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column("password", Text, nullable=False)

    def __repr__(self) -> str:
        """Developer-friendly representation; never includes the password hash."""
        return f"<User(id={self.id}, email='{self.email}')>"
