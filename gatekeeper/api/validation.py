"""Request validation steps that run before a handler, separate from authentication."""

from collections.abc import Callable
from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_headers(schema: type[SchemaT]) -> Callable[[Request], SchemaT]:
    """
    Build a dependency that validates request headers against schema.
    Mismatches raise RequestValidationError, which FastAPI returns as 422.
    """

    def dependency(request: Request) -> SchemaT:
        try:
            return schema.model_validate(dict(request.headers))
        except ValidationError as e:
            errors = [
                {**err, "loc": ("header", *err["loc"])}
                for err in e.errors(include_url=False, include_context=False)
            ]
            raise RequestValidationError(errors) from e

    return dependency
