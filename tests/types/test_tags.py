import pytest

from spgraph.errors import InvalidArgumentError
from spgraph.types.base import UNTAGGED, Tagged, Untagged, as_tag


def test_untagged_values_are_equal():
    assert Untagged() == UNTAGGED
    assert hash(Untagged()) == hash(UNTAGGED)
    assert UNTAGGED.value is None


def test_tagged_equality_by_name():
    assert Tagged("a") == Tagged("a")
    assert Tagged("a") != Tagged("b")
    assert Tagged("a").value == "a"


def test_untagged_never_equals_tagged():
    assert UNTAGGED != Tagged("")
    assert UNTAGGED != Tagged("None")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, UNTAGGED),
        ("x", Tagged("x")),
        ("", Tagged("")),
        (UNTAGGED, UNTAGGED),
        (Tagged("y"), Tagged("y")),
    ],
)
def test_as_tag(raw, expected):
    assert as_tag(raw) == expected


@pytest.mark.parametrize("raw", [1, 2.5, b"bytes", ["x"]])
def test_as_tag_rejects_other_types(raw):
    with pytest.raises(InvalidArgumentError):
        as_tag(raw)


def test_string_forms():
    assert str(Tagged("fast")) == "fast"
    assert str(UNTAGGED) == "<untagged>"
