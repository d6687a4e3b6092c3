from __future__ import annotations

import pytest

from thing.naming import split_repository, template_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-app", "my-app"),
        ("foo/", "foo"),
        ("sub/my-app", "my-app"),
        ("a/b/c/", "c"),
        ("My Project", "My Project"),
    ],
)
def test_template_name(value, expected):
    assert template_name(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("owner/repo", ("owner", "repo")),
        ("octo-org/hello.world", ("octo-org", "hello.world")),
    ],
)
def test_split_repository_accepts_owner_repo(value, expected):
    assert split_repository(value) == expected


@pytest.mark.parametrize(
    "value", ["repo", "a/b/c", "/repo", "owner/", "", "/", "owner /repo", " owner/repo", "owner/re po"]
)
def test_split_repository_rejects_other_shapes(value):
    assert split_repository(value) is None
