from typing import Any, List
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from socialnet.core.exceptions import Forbidden
from socialnet.deps import get_db, get_current_identity, get_current_admin
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.user_management.schemas.user import User as UserSchema, UserDeleted, UserUpdate
from socialnet.modules.user_management.services.user import get_users, get_user_or_404, update_user, delete_user
from socialnet.modules.posts.schemas.post import Post as PostSchema
from socialnet.modules.posts.services.post import expand_post, get_user_posts

router = APIRouter()
admin_router = APIRouter()
logger = logging.getLogger("socialnet")

@router.get("", response_model=List[UserSchema])
def read_users(
    db: Session = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
) -> Any:
    """List all users (admin only)"""
    return get_users(db)

@router.get("/me", response_model=UserSchema)
def read_user_me(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Get current user"""
    return get_user_or_404(db, identity.id)

@router.get("/{user_id}", response_model=UserSchema)
def read_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Get a specific user by id"""
    return get_user_or_404(db, user_id)

@router.put("/{user_id}", response_model=UserSchema)
def update_user_by_id(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    user_in: UserUpdate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Update your own profile fields"""
    if user_id != identity.id:
        raise Forbidden("You can only update your own profile")
    user = get_user_or_404(db, user_id)
    return update_user(db, user, user_in)

@router.get("/{user_id}/posts", response_model=List[PostSchema])
def read_user_owned_posts(
    *,
    db: Session = Depends(get_db),
    user_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Get posts created by a specific user"""
    get_user_or_404(db, user_id)
    return [expand_post(post) for post in get_user_posts(db, user_id)]

def _delete_user(db: Session, user_id: str, admin: Identity) -> UserDeleted:
    user = get_user_or_404(db, user_id)
    deleted_posts = delete_user(db, user)
    logger.info(f"Admin {admin.id} deleted user {user_id}")
    return UserDeleted(message="User deleted successfully", deleted_posts=deleted_posts)

@router.delete("/{user_id}", response_model=UserDeleted)
def delete_user_by_id(
    user_id: str,
    db: Session = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
) -> Any:
    """Delete a user and all of their posts (admin only)"""
    return _delete_user(db, user_id, admin)

@admin_router.delete("/users/{user_id}", response_model=UserDeleted)
def admin_delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
) -> Any:
    """Delete a user and all of their posts (admin only)"""
    return _delete_user(db, user_id, admin)
