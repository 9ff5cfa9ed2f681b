"""
Evaluation of filters against JSON values.

This module provides path resolution, per-operator evaluation, and the
top-level check entry point.
"""

from .resolver import resolve_path, IDENTITY_PATH
from .operators import apply_operator, check, select

__all__ = [
    "resolve_path",
    "IDENTITY_PATH",
    "apply_operator",
    "check",
    "select",
]
