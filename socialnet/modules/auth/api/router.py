"""Authentication router: registration and password login"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from socialnet.core.config import Settings
from socialnet.deps import get_app_settings, get_db
from socialnet.modules.auth.schemas.auth import LoginRequest, LoginResponse
from socialnet.modules.auth.services.auth import login
from socialnet.modules.user_management.schemas.user import User as UserSchema, UserCreate
from socialnet.modules.user_management.services.user import create_user

router = APIRouter()

@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register(
    *,
    db: Session = Depends(get_db),
    user_in: UserCreate,
):
    """Create a new account"""
    return create_user(db, user_in)

@router.post("/login", response_model=LoginResponse)
def login_with_password(
    *,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    login_in: LoginRequest,
) -> LoginResponse:
    """Authenticate with email and password and receive a bearer token"""
    return login(db, login_in, settings)
