"""Like toggling."""

import pytest

from socialnet.core.exceptions import NotFound
from socialnet.modules.auth.schemas.auth import Identity
from socialnet.modules.posts.likes.models.like import PostLike
from socialnet.modules.posts.models.post import Post
from socialnet.modules.posts.likes.services.like import toggle_like
from socialnet.modules.posts.services.post import get_post


def _toggle(client, account, post_id):
    response = client.post(f"/posts/{post_id}/like", headers=account.headers)
    assert response.status_code == 200, response.text
    return response.json()


def test_toggle_twice_restores_original_state(client, alice, bob, create_post):
    post = create_post(alice)
    _toggle(client, bob, post["id"])

    liked = _toggle(client, alice, post["id"])
    assert sorted(liked["likes"]) == sorted([alice.id, bob.id])

    restored = _toggle(client, alice, post["id"])
    assert restored["likes"] == [bob.id]


def test_response_is_expanded(client, alice, bob, create_post, add_comment):
    post = create_post(alice)
    add_comment(bob, post["id"], "hi")

    liked = _toggle(client, bob, post["id"])
    assert liked["postedBy"]["name"] == "Alice"
    assert liked["comments"][0]["commentedBy"]["name"] == "Bob"
    assert liked["likes"] == [bob.id]


def test_missing_post(client, alice):
    response = client.post("/posts/missing/like", headers=alice.headers)
    assert response.status_code == 404


def test_requires_token(client, alice, create_post):
    post = create_post(alice)
    assert client.post(f"/posts/{post['id']}/like").status_code == 401


def test_service_keeps_likes_a_set(session_factory, alice, create_post):
    post_id = create_post(alice)["id"]
    identity = Identity(id=alice.id)

    db = session_factory()
    try:
        post = toggle_like(db, get_post(db, post_id), identity)
        assert [like.user_id for like in post.likes] == [alice.id]
        assert db.query(PostLike).filter(PostLike.post_id == post_id).count() == 1

        post = toggle_like(db, post, identity)
        assert post.likes == []
        assert db.query(PostLike).count() == 0
    finally:
        db.close()


def test_service_reports_a_post_deleted_mid_toggle(session_factory, alice):
    identity = Identity(id=alice.id)
    vanished = Post(id="vanished", title="gone", posted_by=alice.id)

    db = session_factory()
    try:
        with pytest.raises(NotFound) as exc_info:
            toggle_like(db, vanished, identity)
        assert exc_info.value.detail == "Post not found"
        assert db.query(PostLike).count() == 0
    finally:
        db.close()
