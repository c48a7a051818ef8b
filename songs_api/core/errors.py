# ============================================================================
# FILE: songs_api/core/errors.py
# ============================================================================
from typing import Dict, List
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)

# Location prefixes that are not part of the field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if str(part) not in _LOCATION_PREFIXES]
    return ".".join(parts) or "body"


def _message(field: str, error: dict) -> str:
    if error.get("type") == "missing":
        return f"The {field} field is required."
    msg = error.get("msg", "Invalid value")
    # custom validators carry their own wording
    if msg.startswith("Value error, "):
        return f"The {field} field {msg[len('Value error, '):]}."
    return msg


def format_validation_errors(errors: List[dict]) -> Dict[str, List[str]]:
    """Group validation errors by field name"""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        grouped.setdefault(field, []).append(_message(field, error))
    return grouped


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 422 with per-field messages"""
    errors = format_validation_errors(exc.errors())
    messages = [msg for field_messages in errors.values() for msg in field_messages]
    message = messages[0] if messages else "The given data was invalid."
    if len(messages) > 1:
        extra = len(messages) - 1
        message = f"{message} (and {extra} more error{'s' if extra > 1 else ''})"

    logger.info(f"Validation failed for {request.method} {request.url.path}: {list(errors)}")
    return JSONResponse(
        status_code=422,
        content={"message": message, "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
