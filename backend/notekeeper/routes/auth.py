"""
NoteKeeper Backend — Account Route Handlers
=============================================

What:  POST /signup (register) and POST /login (obtain a session token).
How:   The body is decoded as JSON regardless of Content-Type and validated
       against the schemas (routes/body.py); the work is
       delegated to UserService / AuthService. Failures propagate as
       application exceptions and are formatted by the global handlers.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.database import get_db_session
from notekeeper.routes.body import json_body, json_request_body
from notekeeper.schemas.auth import LoginRequest, LoginResponse, SignupRequest
from notekeeper.schemas.common import ErrorResponse
from notekeeper.services.auth_service import auth_service
from notekeeper.services.session_registry import SessionRegistry, get_session_registry
from notekeeper.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        200: {"description": "User created (empty body)"},
        400: {"description": "Malformed request body", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Register a new user",
    openapi_extra=json_request_body(SignupRequest),
)
async def signup(
    payload: SignupRequest = Depends(json_body(SignupRequest)),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Register a new user.

    No duplicate-email check: signing up twice with one address creates two
    accounts, and login uses the older one whose password matches.
    """
    await user_service.create_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Malformed request body", "model": ErrorResponse},
        401: {"description": "No user with these credentials", "model": ErrorResponse},
    },
    summary="Log in and obtain a session token",
    openapi_extra=json_request_body(LoginRequest),
)
async def login(
    payload: LoginRequest = Depends(json_body(LoginRequest)),
    db: AsyncSession = Depends(get_db_session),
    registry: SessionRegistry = Depends(get_session_registry),
) -> LoginResponse:
    """Exchange email/password for a session token (`sid`)."""
    sid = await auth_service.login(db, registry, payload.email, payload.password)
    return LoginResponse(sid=sid)
