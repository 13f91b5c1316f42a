from typing import Generator, Optional
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from socialnet.core.config import Settings
from socialnet.core.exceptions import Forbidden, InvalidCredential, Unauthenticated
from socialnet.core.security import decode_access_token
from socialnet.modules.auth.schemas.auth import Identity

logger = logging.getLogger("socialnet")

# Reads "Authorization: Bearer <token>"; missing or malformed headers yield None
bearer_scheme = HTTPBearer(auto_error=False)

def get_app_settings(request: Request) -> Settings:
    """
    Dependency for the settings the application was created with
    """
    return request.app.state.settings

def get_db(request: Request) -> Generator:
    """
    Dependency for getting DB session
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> Identity:
    """
    Dependency that verifies the bearer token and attaches its claims to the request.

    The token is trusted as-is: the store is not consulted, so a revoked admin
    flag stays in effect until the token expires.
    """
    if credentials is None:
        raise Unauthenticated()

    payload = decode_access_token(credentials.credentials, settings)
    try:
        identity = Identity(id=payload.get("sub"), is_admin=payload.get("admin", False))
    except ValidationError:
        logger.warning("Token payload missing 'sub' field")
        raise InvalidCredential()

    request.state.identity = identity
    return identity

def get_current_admin(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """
    Dependency restricting an endpoint to identities with the admin flag
    """
    if not identity.is_admin:
        raise Forbidden("Admin privileges required")
    return identity
