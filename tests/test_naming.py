from __future__ import annotations

import pytest

from create_vue.naming import is_valid_package_name, to_valid_package_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-app", True),
        ("vue-project", True),
        ("@scope/pkg", True),
        ("pkg.name_1~", True),
        ("My App", False),
        ("MyApp", False),
        (".hidden", False),
        ("_private", False),
        ("", False),
    ],
)
def test_is_valid_package_name(value, expected):
    assert is_valid_package_name(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("My App!!", "my-app-"),
        ("  Hello   World  ", "hello-world"),
        (".dotted", "dotted"),
        ("_under_score", "under-score"),
        ("Café Project", "caf--project"),
    ],
)
def test_to_valid_package_name(value, expected):
    assert to_valid_package_name(value) == expected


@pytest.mark.parametrize("value", ["My App!!", "Some Project", "__init__", "a.b.c", "x@y/z", "2048 Game"])
def test_to_valid_package_name_is_valid_and_idempotent(value):
    once = to_valid_package_name(value)
    assert is_valid_package_name(once)
    assert to_valid_package_name(once) == once
