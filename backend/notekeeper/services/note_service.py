"""
NoteKeeper Backend — Note Store Operations
============================================

What:  Insert, list and delete rows of the `notes` table, always scoped to
       one owner id.
How:   Stateless service; each method receives the request's AsyncSession.
Who:   Called by the /notes route handlers after the caller's owner id has
       been resolved by AuthService.

Ownership Rules:
    - create_note() stamps the given owner id on the new row
    - list_notes() filters on owner id, so one user never sees another's notes
    - delete_note() filters on BOTH note id and owner id; a foreign or
      unknown id deletes nothing and is not an error

Note ids:
    The id returned by create_note() is the primary key assigned to that
    exact row during flush, never a "max(id)" re-query.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.exceptions import DatabaseError
from notekeeper.models.note import Note

logger = logging.getLogger(__name__)


class NoteService:
    """
    Store operations on notes.

    Error Handling Strategy:
        SQLAlchemy failures are wrapped in DatabaseError (→ 500) with the
        operation name in the context. Nothing is retried.
    """

    async def create_note(self, db: AsyncSession, owner_id: int, text: str) -> int:
        """
        Insert a note for `owner_id` and return its id.

        Raises:
            DatabaseError: insert or commit failed
        """
        try:
            note = Note(user_id=owner_id, note=text)
            db.add(note)
            await db.flush()  # assigns the primary key of this row
            note_id = note.id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating note for user %d: %s", owner_id, str(e))
            raise DatabaseError(
                message="Error creating note",
                context={"operation": "create_note", "error_type": type(e).__name__},
            )

        logger.info("Note %d created for user %d", note_id, owner_id)
        return note_id

    async def list_notes(self, db: AsyncSession, owner_id: int) -> List[Note]:
        """
        All notes of `owner_id`, oldest first. Empty list when there are none.

        Query plan:
            SELECT id, user_id, note FROM notes WHERE user_id = :owner ORDER BY id
            → idx_notes_user_id
        """
        try:
            result = await db.execute(
                select(Note).where(Note.user_id == owner_id).order_by(Note.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes for user %d: %s", owner_id, str(e))
            raise DatabaseError(
                message="Error listing notes",
                context={"operation": "list_notes", "error_type": type(e).__name__},
            )

    async def delete_note(self, db: AsyncSession, note_id: int, owner_id: int) -> int:
        """
        Delete note `note_id` if it belongs to `owner_id`.

        Returns:
            Number of rows removed (0 or 1). Callers treat 0 as success.

        Raises:
            DatabaseError: delete or commit failed
        """
        try:
            result = await db.execute(
                delete(Note).where(Note.id == note_id, Note.user_id == owner_id)
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %d: %s", note_id, str(e))
            raise DatabaseError(
                message="Error deleting note",
                context={"operation": "delete_note", "error_type": type(e).__name__},
            )

        removed = result.rowcount or 0
        if removed:
            logger.info("Note %d deleted by user %d", note_id, owner_id)
        else:
            logger.debug("Delete of note %d by user %d matched no row", note_id, owner_id)
        return removed


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
