"""
NoteKeeper Backend — Account Request/Response Schemas
=======================================================

What:  Pydantic models for POST /signup and POST /login.
How:   routes/body.py validates request bodies against these models in strict
       mode; any mismatch (missing field, wrong type, undecodable JSON) becomes
       a 400 response through the RequestValidationError handler in main.py.
"""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Body of POST /signup. No format rules beyond "three strings"."""
    name: str = Field(description="Display name")
    email: str = Field(description="Login key; not required to be unique")
    password: str = Field(description="Password; stored as a salted hash")

    model_config = {"strict": True}


class LoginRequest(BaseModel):
    """Body of POST /login."""
    email: str = Field(description="Email used at signup")
    password: str = Field(description="Password used at signup")

    model_config = {"strict": True}


class LoginResponse(BaseModel):
    """Successful login: the opaque session token to send on later requests."""
    sid: str = Field(description="Session token")
