"""
NoteKeeper Backend — User Store Operations
============================================

What:  Insert and look up rows of the `users` table.
How:   Stateless service; each method receives the request's AsyncSession.
Who:   Called by AuthService (login, session owner resolution) and the
       signup route.

Error Handling Strategy:
    Any SQLAlchemy failure is logged with its type and re-raised as
    DatabaseError (→ 500). "No such user" is not an error here: lookups
    return None and the caller decides what that means.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.exceptions import DatabaseError
from notekeeper.models.user import User
from notekeeper.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Store operations on users."""

    async def create_user(
        self,
        db: AsyncSession,
        name: str,
        email: str,
        password: str,
    ) -> int:
        """
        Insert a user and return its id.

        Duplicate emails are accepted; the password is hashed before insert.

        Raises:
            DatabaseError: insert or commit failed
        """
        try:
            user = User(name=name, email=email, password_hash=hash_password(password))
            db.add(user)
            await db.flush()
            user_id = user.id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e))
            raise DatabaseError(
                message="Error creating user",
                context={"operation": "create_user", "error_type": type(e).__name__},
            )

        logger.info("User %d registered", user_id)
        return user_id

    async def find_by_email_and_password(
        self,
        db: AsyncSession,
        email: str,
        password: str,
    ) -> Optional[User]:
        """
        Return the first user (lowest id) with this email whose stored hash
        matches `password`, or None.
        """
        try:
            result = await db.execute(
                select(User).where(User.email == email).order_by(User.id)
            )
            candidates = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error looking up credentials: %s", str(e))
            raise DatabaseError(
                context={"operation": "find_by_email_and_password", "error_type": type(e).__name__},
            )

        for user in candidates:
            if verify_password(password, user.password_hash):
                return user
        return None

    async def find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        """Return the first user (lowest id) with this email, or None."""
        try:
            result = await db.execute(
                select(User).where(User.email == email).order_by(User.id).limit(1)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up user by email: %s", str(e))
            raise DatabaseError(
                context={"operation": "find_by_email", "error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
