"""
Custom exceptions for Linkshelf API
"""

from fastapi import HTTPException, status


class LinkshelfException(Exception):
    """Base exception for Linkshelf"""
    pass


class PermissionDeniedError(LinkshelfException):
    """Caller does not own the resource it tried to change"""

    def __init__(self, resource: str = "resource", action: str = "modify"):
        self.resource = resource
        self.action = action
        super().__init__(f"Not allowed to {action} {resource}")


class NotFoundError(LinkshelfException):
    """Resource not found"""

    def __init__(self, resource: str = "resource", identifier: str = ""):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


# HTTP exception helpers
def http_401_unauthorized(detail: str = "Invalid authentication credentials"):
    """Raise 401 Unauthorized"""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def http_404_not_found(detail: str = "Resource not found"):
    """Raise 404 Not Found"""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def http_400_bad_request(detail: str = "Bad request"):
    """Raise 400 Bad Request"""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )
