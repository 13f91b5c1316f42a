import logging

from sqlalchemy.orm import Session

from socialnet.core.config import Settings
from socialnet.core.exceptions import InvalidCredential
from socialnet.core.security import create_access_token, verify_password
from socialnet.modules.auth.schemas.auth import LoginRequest, LoginResponse, LoginUser
from socialnet.modules.user_management.models.user import User
from socialnet.modules.user_management.services.user import get_user_by_email

logger = logging.getLogger("socialnet")

def authenticate_user(db: Session, email: str, password: str) -> User:
    """
    Return the user owning email and password.

    An unknown email and a wrong password fail identically so callers
    cannot tell which one was wrong.
    """
    user = get_user_by_email(db, email=email)
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Failed login attempt")
        raise InvalidCredential("Invalid email or password")
    return user

def login(db: Session, login_in: LoginRequest, settings: Settings) -> LoginResponse:
    """Authenticate and issue an access token with the public profile"""
    user = authenticate_user(db, login_in.email, login_in.password)
    token = create_access_token(user.id, user.is_admin, settings)
    return LoginResponse(token=token, user=LoginUser.model_validate(user))
