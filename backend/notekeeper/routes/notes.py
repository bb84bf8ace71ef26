"""
NoteKeeper Backend — Notes Route Handlers
===========================================

What:  GET /notes (list), POST /notes (create), DELETE /notes (delete).
How:   Each handler runs Parse → Authenticate → Authorize → Execute → Respond:
       routes/body.py decodes the JSON body, AuthService turns `sid` into
       the owning user, NoteService performs the owner-scoped store operation.
Who:   Any client holding a session token from POST /login.

The token travels in the JSON body for all three methods, GET and DELETE
included. Nothing is written before owner resolution succeeds.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.database import get_db_session
from notekeeper.routes.body import json_body, json_request_body
from notekeeper.schemas.common import ErrorResponse
from notekeeper.schemas.note import (
    NoteCreatedResponse,
    NoteCreateRequest,
    NoteDeleteRequest,
    NoteItem,
    NoteListResponse,
    SessionRequest,
)
from notekeeper.services.auth_service import auth_service
from notekeeper.services.note_service import note_service
from notekeeper.services.session_registry import SessionRegistry, get_session_registry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

_AUTH_ERRORS = {
    400: {"description": "Malformed request body", "model": ErrorResponse},
    401: {"description": "Unknown session or user", "model": ErrorResponse},
}


@router.get(
    "/notes",
    response_model=NoteListResponse,
    responses=_AUTH_ERRORS,
    summary="List the caller's notes",
    openapi_extra=json_request_body(SessionRequest),
)
async def list_notes(
    payload: SessionRequest = Depends(json_body(SessionRequest)),
    db: AsyncSession = Depends(get_db_session),
    registry: SessionRegistry = Depends(get_session_registry),
) -> NoteListResponse:
    """Return every note owned by the session's user; the owner id is omitted."""
    owner = await auth_service.resolve_owner(db, registry, payload.sid)
    notes = await note_service.list_notes(db, owner.id)
    return NoteListResponse(notes=[NoteItem.model_validate(n) for n in notes])


@router.post(
    "/notes",
    response_model=NoteCreatedResponse,
    responses={
        **_AUTH_ERRORS,
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Create a note",
    openapi_extra=json_request_body(NoteCreateRequest),
)
async def create_note(
    payload: NoteCreateRequest = Depends(json_body(NoteCreateRequest)),
    db: AsyncSession = Depends(get_db_session),
    registry: SessionRegistry = Depends(get_session_registry),
) -> NoteCreatedResponse:
    """Store a note for the session's user and return the new note's id."""
    owner = await auth_service.resolve_owner(db, registry, payload.sid)
    note_id = await note_service.create_note(db, owner.id, payload.note)
    return NoteCreatedResponse(id=note_id)


@router.delete(
    "/notes",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        200: {"description": "Done (empty body), whether or not a note matched"},
        **_AUTH_ERRORS,
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Delete one of the caller's notes",
    openapi_extra=json_request_body(NoteDeleteRequest),
)
async def delete_note(
    payload: NoteDeleteRequest = Depends(json_body(NoteDeleteRequest)),
    db: AsyncSession = Depends(get_db_session),
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    """
    Delete note `id` if the session's user owns it.

    Another user's note id, or an id that does not exist, is answered with
    the same 200 and leaves the table untouched.
    """
    owner = await auth_service.resolve_owner(db, registry, payload.sid)
    await note_service.delete_note(db, payload.id, owner.id)
    return Response(status_code=status.HTTP_200_OK)
