"""
Filter expression model for jsonfilter.

This module provides the Filter/Operator tree, its JSON (de)serialization,
schema validation, and the error taxonomy raised during evaluation.
"""

from .errors import (
    FilterError,
    PathNotFound,
    TypeMismatch,
    InvalidArrayIndex,
    InvalidPath,
    FilterDepthExceeded,
)
from .models import (
    OperatorKind,
    Operator,
    Filter,
    FILTER_SCHEMA,
    parse_filter_json,
    dump_filter_json,
)

__all__ = [
    "OperatorKind",
    "Operator",
    "Filter",
    "FILTER_SCHEMA",
    "parse_filter_json",
    "dump_filter_json",
    "FilterError",
    "PathNotFound",
    "TypeMismatch",
    "InvalidArrayIndex",
    "InvalidPath",
    "FilterDepthExceeded",
]
