#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.scorer.errors import (
    ScoringError,
    MatchNotFound,
    PreconditionFailed,
    StorageUnavailable,
)

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class MatchNotFoundException(ServiceException):
    """Raised when a match is not found."""
    pass


class ContestantNotFoundException(ServiceException):
    """Raised when a contestant is not found."""
    pass


def _error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, (MatchNotFoundException, ContestantNotFoundException)):
        status_code = 404
    else:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def scoring_exception_handler(
    request: Request,
    exc: ScoringError
) -> JSONResponse:
    """
    Map scoring errors to HTTP status codes.

    MatchNotFound -> 404, PreconditionFailed -> 409,
    StorageUnavailable -> 503, anything else -> 500.
    """
    if isinstance(exc, MatchNotFound):
        status_code = 404
    elif isinstance(exc, PreconditionFailed):
        status_code = 409
    elif isinstance(exc, StorageUnavailable):
        status_code = 503
        logger.error(f"Storage unavailable in {request.url.path}: {exc}")
    else:
        status_code = 500
        logger.error(f"Scoring error in {request.url.path}: {exc}", exc_info=True)

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")
    return _error_response(500, "Internal server error", "InternalError")
