"""
NoteKeeper Backend — Notes Request/Response Schemas
=====================================================

What:  Pydantic models defining the /notes API contract.
Why:   Schemas are separate from SQLAlchemy models so the owner id never
       leaves the server: list items carry only `id` and `note`.

Every notes request carries the session token in the JSON body (`sid`),
including GET and DELETE.
"""

from typing import List

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class SessionRequest(BaseModel):
    """Body of GET /notes."""
    sid: str = Field(description="Session token returned by POST /login")

    # No coercion: "1" or 1.0 for an int field, or 5 for a str field, is a 400
    model_config = {"strict": True}


class NoteCreateRequest(SessionRequest):
    """Body of POST /notes."""
    note: str = Field(description="Note text")


class NoteDeleteRequest(SessionRequest):
    """Body of DELETE /notes."""
    id: int = Field(description="Id of the note to delete")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteItem(BaseModel):
    """One note as returned by GET /notes."""
    id: int = Field(description="Note id")
    note: str = Field(description="Note text")

    model_config = {"from_attributes": True}


class NoteListResponse(BaseModel):
    """All notes of the caller, possibly empty."""
    notes: List[NoteItem] = Field(default_factory=list)


class NoteCreatedResponse(BaseModel):
    """Id of the note that was just inserted."""
    id: int = Field(description="Id of the created note")
