"""
NoteKeeper Backend — JSON Body Dependency
===========================================

What:  Decodes the raw request body into a request schema, whatever the
       Content-Type header says.
How:   Reads `request.body()` and runs `model_validate_json`. Pydantic
       errors (undecodable JSON, wrong shape, wrong types) are re-raised as
       RequestValidationError so main.py answers them with the usual 400.
Who:   Every route that takes a JSON body (/signup, /login, /notes).

Usage:
    @router.post("/login", openapi_extra=json_request_body(LoginRequest))
    async def login(payload: LoginRequest = Depends(json_body(LoginRequest))):
        ...
"""

from typing import Any, Awaitable, Callable, Dict, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: Type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that parses the request body as `model`."""

    async def parse(request: Request) -> ModelT:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except PydanticValidationError as e:
            errors = [
                {**err, "loc": ("body", *err["loc"])}
                for err in e.errors(include_url=False)
            ]
            raise RequestValidationError(errors, body=raw)

    return parse


def json_request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """`openapi_extra` entry documenting `model` as the JSON request body."""
    return {
        "requestBody": {
            "content": {"application/json": {"schema": model.model_json_schema()}},
            "required": True,
        }
    }
