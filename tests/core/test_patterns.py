import pytest

from core.patterns import is_global_wildcard, is_parameter_segment, matches


@pytest.mark.parametrize("pattern", ["*", "/*", "*/", "/*/", "/*?x=1"])
@pytest.mark.parametrize("candidate", ["", "/", "/users", "/a/b/c/d/e", "/users/42/edit?tab=1"])
def test_global_wildcard_matches_everything(pattern, candidate):
    assert matches(pattern, candidate) is True


@pytest.mark.parametrize(
    ("pattern", "candidate", "expected"),
    [
        ("/users/*", "/users", True),
        ("/users/*", "/users/", True),
        ("/users/*", "/users/42", True),
        ("/users/*", "/users/42/edit", True),
        ("/users/*", "/usersx", False),
        ("/users/*", "/", False),
        ("/users//*", "/users/42", True),
        ("/a/b/*", "/a", False),
    ],
)
def test_descendant_wildcard(pattern, candidate, expected):
    assert matches(pattern, candidate) is expected


@pytest.mark.parametrize(
    ("pattern", "candidate", "expected"),
    [
        ("/reservations", "/reservations", True),
        ("/reservations/", "/reservations?page=2", True),
        ("/reservations", "/reservations/12", False),
        ("/Reservations", "/reservations", False),
        ("/", "/", True),
        ("/", "/users", False),
    ],
)
def test_exact_match(pattern, candidate, expected):
    assert matches(pattern, candidate) is expected


@pytest.mark.parametrize(
    ("pattern", "candidate", "expected"),
    [
        ("/users/:id", "/users/42", True),
        ("/users/:id", "/users/42/edit", False),
        ("/users/:id", "/users", False),
        ("/users/[id]", "/users/42", True),
        ("/users/[user]/edit", "/users/42/edit", True),
        ("/users/[user]/edit", "/users/42/view", False),
        ("/:section/[id]", "/reservations/7", True),
        ("/users/42", "/users/43", False),
    ],
)
def test_parameter_segments(pattern, candidate, expected):
    assert matches(pattern, candidate) is expected


def test_unknown_grammar_never_raises():
    assert matches("/users/**", "/users/42") is False
    assert matches("[[[", "/") is False
    assert matches(None, None) is True


@pytest.mark.parametrize(
    ("segment", "expected"),
    [("[user]", True), (":id", True), ("[]", True), ("user", False), ("[user", False), ("user]", False)],
)
def test_is_parameter_segment(segment, expected):
    assert is_parameter_segment(segment) is expected


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [("*", True), ("/*", True), ("//*/", True), ("/users/*", False), ("/", False), ("**", False)],
)
def test_is_global_wildcard(pattern, expected):
    assert is_global_wildcard(pattern) is expected
