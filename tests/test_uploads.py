"""Stored upload naming."""
from __future__ import annotations

import pytest

from linkup.services.errors import ValidationError
from linkup.services.upload_service import _extension_for, classify_content_type


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        ("image/png", ".png"),
        ("IMAGE/PNG; charset=binary", ".png"),
        ("video/mp4", ".mp4"),
        ("image/svg+xml", ""),
        ("image/x-unheard-of", ""),
    ],
)
def test_extension_comes_from_content_type(content_type, expected):
    assert _extension_for(content_type) == expected


def test_classify_rejects_non_media():
    assert classify_content_type("video/webm") == "video"
    with pytest.raises(ValidationError):
        classify_content_type("text/html")
