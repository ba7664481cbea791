from typing import Any

from jsonschema import validate, ValidationError
from fastapi import HTTPException
from .schemas import REQUEST_SCHEMAS


def validate_request_body(route: str, body: Any) -> None:
    """Validate a request body against the route's JSON schema. Raises HTTP 400 on failure."""
    schema = REQUEST_SCHEMAS[route]

    try:
        validate(instance=body, schema=schema)
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "body"
        raise HTTPException(
            status_code=400,
            detail=f"Invalid request body for '{route}' at {location}: {e.message}"
        )
