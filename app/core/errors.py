"""
Error handling utilities following FastAPI best practices

Every application error is an ErrorResponse tagged with an ErrorKind.
The HTTP status of an error is derived from its kind only.
"""

import traceback
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import config
from app.core.logger import logger


class ErrorKind(str, Enum):
    """Closed set of error kinds surfaced by the service"""
    VALIDATION = "validation_error"
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    DUPLICATE_SLUG = "duplicate_slug"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    NO_FILES_PROVIDED = "no_files_provided"
    SERVER_MISCONFIGURED = "server_misconfigured"
    CONNECTIVITY = "connectivity_error"
    UPLOAD_FAILED = "upload_failed"
    REQUEST = "request_error"
    INTERNAL = "internal_error"


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.MISSING_CREDENTIAL: 401,
    ErrorKind.INVALID_CREDENTIAL: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_SLUG: 400,
    ErrorKind.PAYLOAD_TOO_LARGE: 413,
    ErrorKind.NO_FILES_PROVIDED: 400,
    ErrorKind.SERVER_MISCONFIGURED: 500,
    ErrorKind.CONNECTIVITY: 503,
    ErrorKind.UPLOAD_FAILED: 500,
    ErrorKind.REQUEST: 400,
    ErrorKind.INTERNAL: 500,
}


def status_for(kind: ErrorKind) -> int:
    """Map an error kind to its HTTP status code"""
    return _STATUS_BY_KIND[kind]


class ErrorResponse(Exception):
    """Base exception for application errors"""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return status_for(self.kind)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "error": self.kind.value, "details": self.details}


class ValidationError(ErrorResponse):
    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"


class MissingCredential(ErrorResponse):
    kind = ErrorKind.MISSING_CREDENTIAL
    default_message = "No token, authorization denied"


class InvalidCredential(ErrorResponse):
    kind = ErrorKind.INVALID_CREDENTIAL
    default_message = "Invalid or expired token"


class Forbidden(ErrorResponse):
    kind = ErrorKind.FORBIDDEN
    default_message = "Admin privileges required"


class NotFound(ErrorResponse):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class DuplicateSlug(ErrorResponse):
    kind = ErrorKind.DUPLICATE_SLUG
    default_message = "Product with this slug already exists"


class PayloadTooLarge(ErrorResponse):
    kind = ErrorKind.PAYLOAD_TOO_LARGE
    default_message = "File too large"


class NoFilesProvided(ErrorResponse):
    kind = ErrorKind.NO_FILES_PROVIDED
    default_message = "No images provided."


class ServerMisconfigured(ErrorResponse):
    kind = ErrorKind.SERVER_MISCONFIGURED
    default_message = "Server is not configured"


class ServiceUnavailable(ServerMisconfigured):
    """Object storage credentials are missing"""
    default_message = "Image storage is not configured on the server."


class ConfigurationError(ServerMisconfigured):
    """Database connection string is missing"""
    default_message = "Database connection string is not configured"


class ConnectivityError(ErrorResponse):
    kind = ErrorKind.CONNECTIVITY
    default_message = "Database is unavailable"


class UploadFailed(ErrorResponse):
    kind = ErrorKind.UPLOAD_FAILED
    default_message = "Failed to upload images."


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    message: str
    error: str
    details: Optional[dict] = None


def _request_metadata(request: Request, status_code: int, event: str) -> Dict[str, Any]:
    return {
        "event": event,
        "status_code": status_code,
        "url": str(request.url),
        "method": request.method,
    }


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse exceptions"""
    metadata = {**_request_metadata(request, exc.status_code, "error_response"), **exc.details}

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", error=exc, metadata=metadata)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request body/query validation failures"""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(
        "Validation error",
        metadata={**_request_metadata(request, 400, "validation_error"), "errors": errors},
    )
    return JSONResponse(
        status_code=status_for(ErrorKind.VALIDATION),
        content=ValidationError(details={"errors": errors}).to_dict(),
    )


# Framework-raised HTTP errors keep their own status; other 4xx are request_error
_KIND_BY_HTTP_STATUS = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.MISSING_CREDENTIAL,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    413: ErrorKind.PAYLOAD_TOO_LARGE,
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for FastAPI / Starlette HTTPException"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata=_request_metadata(request, exc.status_code, "http_exception"),
    )
    if exc.status_code >= 500:
        kind = ErrorKind.INTERNAL
    else:
        kind = _KIND_BY_HTTP_STATUS.get(exc.status_code, ErrorKind.REQUEST)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "error": kind.value, "details": {}},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Handler for anything not anticipated by the service"""
    metadata = _request_metadata(request, 500, "unhandled_exception")

    if config.environment == "development":
        # Include more detailed error info in development
        metadata["traceback"] = "".join(traceback.format_exception(exc))

    logger.error("Unhandled exception", error=exc, metadata=metadata)

    return JSONResponse(
        status_code=500,
        content=ErrorResponse().to_dict(),
    )
