"""
Centralized Error Handling

Provides consistent error responses and logging across the application.
Domain exceptions raised by services are mapped to HTTP status codes here,
so services never import FastAPI response types.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Dict, Any
import logging
import traceback

from linkshelf.core.exceptions import PermissionDeniedError, NotFoundError
from linkshelf.utils.sanitize import sanitize_string

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling"""

    @staticmethod
    def handle_database_error(error: Exception) -> Dict[str, Any]:
        """
        Handle database errors

        Args:
            error: Database exception

        Returns:
            Error dictionary with message and details
        """
        if isinstance(error, IntegrityError):
            logger.warning(f"Database integrity error: {error}")
            return {
                "error": "integrity_error",
                "message": "Data integrity violation. Duplicate entry or constraint failed.",
                "details": str(error.orig) if hasattr(error, 'orig') else str(error)
            }

        logger.error(f"Database error: {error}")
        return {
            "error": "database_error",
            "message": "Database error occurred.",
        }

    @staticmethod
    def handle_not_found_error(resource: str, identifier: str) -> Dict[str, Any]:
        """Missing user, collection or link"""
        logger.warning(f"{resource} not found: {identifier}")
        return {
            "error": "not_found",
            "message": f"{resource.capitalize()} not found.",
            "resource": resource,
            "identifier": identifier
        }

    @staticmethod
    def handle_permission_error(resource: str, action: str) -> Dict[str, Any]:
        """
        Ownership violation

        Missing and foreign resources share this response, so callers
        cannot probe for ids they do not own.
        """
        logger.warning(f"Denied {action} on {resource}")
        return {
            "error": "permission_denied",
            "message": f"Not allowed to {action} this {resource}.",
            "resource": resource,
            "action": action
        }

    @staticmethod
    def handle_generic_error(error: Exception) -> Dict[str, Any]:
        """
        Handle generic/unknown errors

        Args:
            error: Exception

        Returns:
            Error dictionary
        """
        logger.error(sanitize_string(f"Unexpected error: {error}\n{traceback.format_exc()}"))
        return {
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again.",
            "type": type(error).__name__
        }


# Global exception handlers for FastAPI

async def permission_error_handler(request: Request, exc: PermissionDeniedError):
    """FastAPI exception handler for ownership violations"""
    error_data = ErrorHandler.handle_permission_error(exc.resource, exc.action)
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=error_data
    )


async def not_found_error_handler(request: Request, exc: NotFoundError):
    """FastAPI exception handler for missing resources"""
    error_data = ErrorHandler.handle_not_found_error(exc.resource, exc.identifier)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_data
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """FastAPI exception handler for database errors"""
    error_data = ErrorHandler.handle_database_error(exc)
    status_code = (
        status.HTTP_409_CONFLICT if isinstance(exc, IntegrityError)
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(
        status_code=status_code,
        content=error_data
    )


async def generic_error_handler(request: Request, exc: Exception):
    """FastAPI exception handler for generic errors"""
    error_data = ErrorHandler.handle_generic_error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_data
    )


# Setup function for FastAPI app
def setup_error_handlers(app):
    """
    Setup global error handlers for FastAPI app

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(PermissionDeniedError, permission_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    logger.info("Error handlers registered")
