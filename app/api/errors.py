"""
Exception handlers that turn application errors into JSON responses.
"""
import logging
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import VALIDATION_FAILED, VehicleValidationError
from app.schemas.errors import FieldError, ValidationErrorResponse, field_errors_from_pydantic

logger = logging.getLogger(__name__)

def _validation_response(errors: List[FieldError]) -> JSONResponse:
    body = ValidationErrorResponse(message=VALIDATION_FAILED, errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

async def vehicle_validation_error_handler(request: Request, exc: VehicleValidationError):
    logger.warning(
        "Rejected %s %s: %s",
        request.method,
        request.url.path,
        "; ".join(f"{e.field}: {e.message}" for e in exc.errors),
    )
    return _validation_response(exc.errors)

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            errors.append(FieldError(field="body", message=error.get("msg", "Invalid JSON")))
            continue
        loc = error.get("loc", ())
        # Drop the "body"/"path"/"query" marker FastAPI prepends
        errors.extend(field_errors_from_pydantic([error], strip_prefix=loc[0] if loc else None))
    logger.warning("Malformed request %s %s", request.method, request.url.path)
    return _validation_response(errors)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VehicleValidationError, vehicle_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
