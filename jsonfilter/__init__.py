"""
jsonfilter: declarative predicates over JSON values.

Structure:
- filters/: Filter/Operator model, JSON (de)serialization, error taxonomy
- evaluation/: path resolution and operator evaluation
- validation/: static checks over filter trees
- registry.py: named filters loaded from YAML/JSON rule files
- config.py: environment-driven settings
- values.py: JSON value kinds, structural equality, debug snapshots
"""

from .config import Settings, DEFAULT_SETTINGS, load_settings
from .filters import (
    OperatorKind,
    Operator,
    Filter,
    FILTER_SCHEMA,
    parse_filter_json,
    dump_filter_json,
    FilterError,
    PathNotFound,
    TypeMismatch,
    InvalidArrayIndex,
    InvalidPath,
    FilterDepthExceeded,
)
from .evaluation import apply_operator, check, resolve_path, select
from .registry import RuleOutcome, RuleRegistry

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
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
    "apply_operator",
    "check",
    "resolve_path",
    "select",
    "RuleOutcome",
    "RuleRegistry",
]
