import pytest

from core.paths import normalize, split_segments


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", "/"),
        (None, "/"),
        ("/", "/"),
        ("/a/", "/a"),
        ("/a///", "/a"),
        ("/a?x=1#y", "/a"),
        ("/a#frag?x=1", "/a"),
        ("/?next=/users", "/"),
        ("?x=1", "/"),
        ("//", "/"),
        ("/a//b/", "/a/b"),
        ("/a//*", "/a/*"),
        ("*", "*"),
        ("/*", "/*"),
        ("users", "users"),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "/", "/a/", "/a?x=1#y", "//a//b//", "*", "/*", "/users/[user]/", "x/", "?#"],
)
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_normalize_accepts_non_string_input():
    assert normalize(42) == "42"


def test_split_segments_drops_empty_segments():
    assert split_segments("/users/42") == ["users", "42"]
    assert split_segments("/") == []
