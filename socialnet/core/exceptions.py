"""
Error types raised by the services and request dependencies.

Each one is an HTTPException, so FastAPI's stock handler renders it as
``{"detail": "..."}`` with the matching status code.
"""

from typing import Dict, Optional

from fastapi import HTTPException, status


class SocialNetError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"
    default_headers: Optional[Dict[str, str]] = None

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=self.default_headers,
        )


class Unauthenticated(SocialNetError):
    """No bearer credential on the request"""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"
    default_headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredential(SocialNetError):
    """Bad signature, expired token or failed login"""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"
    default_headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(SocialNetError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not enough permissions"


class NotFound(SocialNetError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class DuplicateEmail(SocialNetError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Email already registered"
