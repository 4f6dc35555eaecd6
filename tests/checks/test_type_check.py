"""Tests for check_type and assert_type."""

import pytest
from easycheck import assert_type, check_type


@pytest.mark.parametrize(
    "item, expected",
    [
        (5, int),
        (True, int),
        (5, [str, int]),
        (5, {str, int}),
        (5, frozenset({int})),
        ("a", (int, str)),
        (None, type(None)),
    ],
    ids=["single", "subclass", "list", "set", "frozenset", "tuple", "none"],
)
def test_check_type_passes(item, expected):
    check_type(item, expected)
    assert_type(item, expected)


@pytest.mark.parametrize(
    "item, expected",
    [(5, str), (5, [str, float]), (5, {str, float}), (5, []), ("a", (int, float))],
    ids=["single", "list", "set", "empty_list", "tuple"],
)
def test_check_type_fails(item, expected):
    """Mismatches raise TypeError, AssertionError for assert_type."""
    with pytest.raises(TypeError):
        check_type(item, expected)
    with pytest.raises(AssertionError):
        assert_type(item, expected)


def test_check_type_message_and_handler():
    with pytest.raises(TypeError, match="expected a string"):
        check_type(5, str, message="expected a string")
    with pytest.raises(ValueError, match="wrong"):
        check_type(5, str, ValueError, "wrong")
    with pytest.raises(ValueError):
        assert_type(5, str, handle_with=ValueError)


def test_check_type_list_short_circuits():
    """The first matching type in a list ends the search."""

    class Exploding(type):
        def __instancecheck__(cls, instance):
            raise RuntimeError("should not be consulted")

    never_checked = Exploding("NeverChecked", (), {})
    check_type(5, [int, never_checked])


def test_check_type_warning():
    with pytest.warns(UserWarning, match="not a string"):
        check_type(5, str, UserWarning, "not a string")


@pytest.mark.usefixtures("checks_disabled")
def test_check_type_disabled():
    check_type(5, str)
    assert_type(5, [str, float], handle_with="bad")
