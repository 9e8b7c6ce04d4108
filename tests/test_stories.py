"""Story lifetime and feed filtering."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from linkup.models import Story
from linkup.services import OwnershipError, ValidationError, create_story, delete_story, list_stories


def test_story_expires_exactly_one_day_after_creation(db, make_user):
    author = make_user()

    record = create_story(db, author_id=author.id, content="sunrise")

    assert record["expires_at"] - record["created_at"] == timedelta(hours=24)
    assert record["user"]["id"] == author.id


def test_story_needs_some_content(db, make_user):
    with pytest.raises(ValidationError):
        create_story(db, author_id=make_user().id, content="  ", image_url=None, video_url="")


def test_media_only_story_is_allowed(db, make_user):
    record = create_story(db, author_id=make_user().id, video_url="/uploads/clip.mp4")

    assert record["content"] is None
    assert record["video_url"] == "/uploads/clip.mp4"


def test_expired_stories_are_filtered_on_read(db, make_user):
    author = make_user()
    now = datetime.now(timezone.utc)
    db.add(
        Story(
            user_id=author.id,
            content="yesterday",
            created_at=now - timedelta(hours=30),
            expires_at=now - timedelta(hours=6),
        )
    )
    db.commit()
    fresh = create_story(db, author_id=author.id, content="today")

    records, _ = list_stories(db)

    assert [r["id"] for r in records] == [fresh["id"]]

    later, _ = list_stories(db, now=now + timedelta(hours=25))
    assert later == []


def test_story_feed_is_global(db, make_user):
    alice = make_user()
    bob = make_user()
    create_story(db, author_id=alice.id, content="a")
    create_story(db, author_id=bob.id, content="b")

    records, _ = list_stories(db, viewer_id=alice.id)

    assert {r["user_id"] for r in records} == {alice.id, bob.id}


def test_only_author_deletes_story(db, make_user):
    author = make_user()
    other = make_user()
    story = create_story(db, author_id=author.id, content="mine")

    with pytest.raises(OwnershipError):
        delete_story(db, story_id=story["id"], requester_id=other.id)

    assert delete_story(db, story_id=story["id"], requester_id=author.id) is True
    assert list_stories(db)[0] == []
