from typing import Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from socialnet.deps import get_db, get_current_identity
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.schemas.post import Post as PostSchema
from socialnet.modules.posts.services.post import expand_post, get_post_or_404
from socialnet.modules.posts.likes.services.like import toggle_like

router = APIRouter()

@router.post("", response_model=PostSchema)
def toggle_post_like(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    identity: Identity = Depends(get_current_identity),
) -> Any:
    """Like a post, or remove the like if the caller already liked it"""
    post = get_post_or_404(db, post_id)
    return expand_post(toggle_like(db, post, identity))
