# Implements security-related functionality:
# JWT token generation and verification (user id and admin flag as claims)
# Password hashing and verification using bcrypt
# Provides core security functions used by the auth module and request dependencies

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from jose import jwt, JWTError
from passlib.context import CryptContext

from socialnet.core.config import Settings
from socialnet.core.exceptions import InvalidCredential

logger = logging.getLogger("socialnet")

BCRYPT_ROUNDS = 10

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def create_access_token(
    user_id: str,
    is_admin: bool,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode = {"exp": expire, "sub": str(user_id), "admin": bool(is_admin)}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Verify signature and expiry of a token and return its claims.

    Raises InvalidCredential when the token does not verify.
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT verification error: {e}")
        raise InvalidCredential()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
