"""Follow toggle and follower statistics."""
from __future__ import annotations

from uuid import uuid4

import pytest

from linkup.services import (
    NotFoundError,
    count_followers,
    count_following,
    get_follow_stats,
    is_following,
    toggle_follow,
)


def test_toggle_follow_flips_edge(db, make_user):
    alice = make_user()
    bob = make_user()

    assert toggle_follow(db, follower_id=alice.id, following_id=bob.id) is True
    assert is_following(db, follower_id=alice.id, following_id=bob.id) is True
    assert is_following(db, follower_id=bob.id, following_id=alice.id) is False

    assert toggle_follow(db, follower_id=alice.id, following_id=bob.id) is False
    assert is_following(db, follower_id=alice.id, following_id=bob.id) is False


def test_counts_are_fresh(db, make_user):
    target = make_user()
    fans = [make_user() for _ in range(3)]
    for fan in fans:
        toggle_follow(db, follower_id=fan.id, following_id=target.id)
    toggle_follow(db, follower_id=target.id, following_id=fans[0].id)

    assert count_followers(db, user_id=target.id) == 3
    assert count_following(db, user_id=target.id) == 1

    toggle_follow(db, follower_id=fans[1].id, following_id=target.id)
    stats = get_follow_stats(db, user_id=target.id, viewer_id=fans[0].id)

    assert stats.followers_count == 2
    assert stats.following_count == 1
    assert stats.is_following is True


def test_self_follow_is_not_blocked_by_the_store(db, make_user):
    loner = make_user()

    assert toggle_follow(db, follower_id=loner.id, following_id=loner.id) is True


def test_stats_for_missing_user(db):
    with pytest.raises(NotFoundError):
        get_follow_stats(db, user_id=uuid4())
