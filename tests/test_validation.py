"""Tests for static filter-tree checks."""

import pytest

from jsonfilter import Filter, FilterDepthExceeded, Operator
from jsonfilter.validation import assert_depth_within, filter_depth, iter_filters

A = Filter("a", Operator.equals(1))
B = Filter("b", Operator.equals(2))
C = Filter("c", Operator.equals(3))


def test_leaf_depth():
    assert filter_depth(A) == 1


def test_empty_combinator_depth():
    assert filter_depth(Filter(".", Operator.or_([]))) == 1


def test_depth_follows_deepest_branch():
    inner = Filter(".", Operator.or_([B, Filter(".", Operator.and_([C]))]))
    root = Filter(".", Operator.and_([A, inner]))
    assert filter_depth(root) == 4


def test_iter_filters_is_pre_order():
    inner = Filter(".", Operator.or_([B, C]))
    root = Filter(".", Operator.and_([A, inner]))
    assert [f.path for f in iter_filters(root)] == [".", "a", ".", "b", "c"]
    assert list(iter_filters(root))[3] is B


def test_assert_depth_within():
    root = Filter(".", Operator.and_([A]))
    assert_depth_within(root, None)
    assert_depth_within(root, 2)
    with pytest.raises(FilterDepthExceeded) as exc:
        assert_depth_within(root, 1)
    assert str(exc.value) == "Filter depth 2 exceeds limit 1"
