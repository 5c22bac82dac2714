import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

_MISSING_TYPES = {"missing", "string_too_short"}


def _is_missing(err: dict) -> bool:
    if err.get("type") in _MISSING_TYPES:
        return True
    # null or blank input for a typed field, e.g. an empty number box
    if "input" not in err:
        return False
    value = err["input"]
    return value is None or (isinstance(value, str) and not value.strip())


def validation_message(errors: list[dict]) -> str:
    """One sentence naming every missing or malformed field."""
    missing: list[str] = []
    invalid: list[str] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if not loc:
            return "Request body is missing or is not a valid JSON object."
        name = loc[-1]
        target = missing if _is_missing(err) else invalid
        if name not in target:
            target.append(name)

    parts = []
    if missing:
        parts.append(f"Required fields are missing: {', '.join(missing)}.")
    if invalid:
        parts.append(f"Invalid values for: {', '.join(invalid)}.")
    return " ".join(parts) or "Invalid request."


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
