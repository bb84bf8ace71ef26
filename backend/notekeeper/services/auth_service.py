"""
NoteKeeper Backend — Authentication Orchestrator
==================================================

What:  Login (credentials → session token) and per-request owner resolution
       (session token → user row).
How:   Composes SessionRegistry and UserService.
Who:   Called by the /login route and by every /notes route.

Owner Resolution (every /notes request):
    ┌──────────┐    ┌──────────────────┐    ┌────────────────────┐
    │   sid    │───▶│ SessionRegistry  │───▶│ UserService        │───▶ User
    │ (body)   │    │ token → email    │    │ email → first user │
    └──────────┘    └──────────────────┘    └────────────────────┘
         unknown token ─▶ 401            no such user ─▶ 401
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.exceptions import UnauthorizedError
from notekeeper.models.user import User
from notekeeper.services.session_registry import SessionRegistry
from notekeeper.services.user_service import user_service

logger = logging.getLogger(__name__)


class AuthService:
    """Stateless; the registry is passed in so tests can supply their own."""

    async def login(
        self,
        db: AsyncSession,
        registry: SessionRegistry,
        email: str,
        password: str,
    ) -> str:
        """
        Check credentials and issue a session token bound to `email`.

        Raises:
            UnauthorizedError: no user with this email/password pair
        """
        user = await user_service.find_by_email_and_password(db, email, password)
        if user is None:
            logger.info("Login rejected for %s", email)
            raise UnauthorizedError(reason="bad_credentials")
        return registry.create_session(email)

    async def resolve_owner(
        self,
        db: AsyncSession,
        registry: SessionRegistry,
        sid: str,
    ) -> User:
        """
        Map a session token to the user who owns the caller's notes.

        Raises:
            UnauthorizedError: token unknown, or its email no longer matches a user
        """
        email = registry.resolve_session(sid)
        user = await user_service.find_by_email(db, email)
        if user is None:
            logger.warning("Session resolved to %s but no such user exists", email)
            raise UnauthorizedError(reason="user_not_found")
        return user


# ── Singleton Instance ────────────────────────────────────────────────────
auth_service = AuthService()
