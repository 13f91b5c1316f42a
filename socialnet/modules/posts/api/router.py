from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from socialnet.deps import get_db, get_current_identity
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.schemas.post import Post as PostSchema, PostCreate, PostUpdate, PostDeleted
from socialnet.modules.posts.services.post import (
    expand_post, get_post_or_404, get_posts, create_post, update_post, delete_post
)

router = APIRouter()

@router.get("", response_model=List[PostSchema])
def read_posts(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Retrieve all posts with author and commenters expanded.
    """
    return [expand_post(post) for post in get_posts(db)]

@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Create new post owned by the caller.
    """
    return expand_post(create_post(db, post_in, identity))

@router.get("/{post_id}", response_model=PostSchema)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Get post by ID.
    """
    return expand_post(get_post_or_404(db, post_id))

@router.put("/{post_id}", response_model=PostSchema)
def update_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    post_in: PostUpdate,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Update a post. Only its owner or an admin may do this.
    """
    post = get_post_or_404(db, post_id)
    return expand_post(update_post(db, post, post_in, identity))

@router.delete("/{post_id}", response_model=PostDeleted)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """
    Delete a post along with its comments and likes.
    Only its owner or an admin may do this.
    """
    post = get_post_or_404(db, post_id)
    delete_post(db, post, identity)
    return {"message": "Post deleted successfully"}
