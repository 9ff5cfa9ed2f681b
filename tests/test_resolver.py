"""Tests for dotted/indexed path resolution."""

import pytest

from jsonfilter import InvalidArrayIndex, InvalidPath, PathNotFound, TypeMismatch, resolve_path
from jsonfilter.evaluation.resolver import _split_indexed_segment

DOC = {
    "user": {"id": 123, "details": {"email": "john@example.com"}},
    "tags": ["rust", "coding", "json"],
    "rows": [{"name": "a"}, {"name": "b"}],
    "count": 5,
}


def test_identity_path_returns_root_itself():
    assert resolve_path(".", DOC) is DOC


def test_nested_fields():
    assert resolve_path("user.details.email", DOC) == "john@example.com"


def test_returns_node_not_copy():
    assert resolve_path("user.details", DOC) is DOC["user"]["details"]


def test_index_after_field():
    assert resolve_path("tags[1]", DOC) == "coding"


def test_index_then_field():
    assert resolve_path("rows[1].name", DOC) == "b"


def test_bare_index_on_array_root():
    assert resolve_path("[0]", ["first", "second"]) == "first"


def test_plus_sign_and_leading_zero_index():
    assert resolve_path("tags[+2]", DOC) == "json"
    assert resolve_path("tags[01]", DOC) == "coding"


def test_missing_field():
    with pytest.raises(PathNotFound) as exc:
        resolve_path("age", {"name": "John"})
    assert exc.value.name == "age"


def test_field_on_non_object_is_path_not_found():
    with pytest.raises(PathNotFound) as exc:
        resolve_path("count.value", DOC)
    assert exc.value == PathNotFound("value")
    with pytest.raises(PathNotFound):
        resolve_path("tags.0", DOC)


def test_index_on_non_array_is_type_mismatch():
    with pytest.raises(TypeMismatch) as exc:
        resolve_path("count[0]", DOC)
    assert exc.value == TypeMismatch("array", "Number(5)")


def test_index_on_object_reports_object_snapshot():
    with pytest.raises(TypeMismatch) as exc:
        resolve_path("user.details[0]", DOC)
    assert exc.value.got == 'Object {"email": String("john@example.com")}'


def test_index_out_of_bounds():
    with pytest.raises(InvalidArrayIndex) as exc:
        resolve_path("tags[3]", DOC)
    assert exc.value.text == "3"


def test_out_of_bounds_reports_normalised_index():
    with pytest.raises(InvalidArrayIndex) as exc:
        resolve_path("tags[007]", DOC)
    assert exc.value.text == "7"


@pytest.mark.parametrize("raw", ["x", "-1", "", " 1", "1e2", "1][2"])
def test_unparseable_index(raw):
    with pytest.raises(InvalidArrayIndex) as exc:
        resolve_path(f"tags[{raw}]", DOC)
    assert exc.value.text == raw


def test_index_is_validated_before_field_lookup():
    with pytest.raises(InvalidArrayIndex):
        resolve_path("missing[x]", DOC)
    with pytest.raises(PathNotFound):
        resolve_path("missing[0]", DOC)


def test_unclosed_bracket_is_a_plain_key():
    assert resolve_path("a[0", {"a[0": 1}) == 1


def test_empty_key():
    assert resolve_path("", {"": "blank"}) == "blank"


def test_split_without_bracket_is_invalid_path():
    with pytest.raises(InvalidPath) as exc:
        _split_indexed_segment("plain]")
    assert str(exc.value) == "Invalid path format: plain]"


def test_resolution_composes_segment_by_segment():
    value = {"a": {"b": {"c": [10, 20]}}}
    step = resolve_path("c", resolve_path("b", resolve_path("a", value)))
    assert resolve_path("a.b.c", value) is step
