"""
Static checks over filter trees, run before any value is evaluated.
"""

from .rules import (
    iter_filters,
    filter_depth,
    assert_depth_within,
)

__all__ = [
    "iter_filters",
    "filter_depth",
    "assert_depth_within",
]
