from __future__ import annotations
import logging
import operator as _op
from typing import Any, Callable, Dict, Iterable, Iterator, Optional

from ..config import DEFAULT_SETTINGS, Settings
from ..filters import Filter, FilterError, Operator, OperatorKind, TypeMismatch
from ..validation import assert_depth_within
from ..values import ARRAY, NUMBER, OBJECT, STRING, as_float, describe, kind_of, values_equal
from .resolver import resolve_path

log = logging.getLogger("jsonfilter.evaluation")

_NUMERIC: Dict[OperatorKind, Callable[[float, float], bool]] = {
    OperatorKind.GREATER_THAN: _op.gt,
    OperatorKind.LESS_THAN: _op.lt,
    OperatorKind.GREATER_OR_EQUAL: _op.ge,
    OperatorKind.LESS_OR_EQUAL: _op.le,
}

_STRING: Dict[OperatorKind, Callable[[str, str], bool]] = {
    OperatorKind.STARTS_WITH: str.startswith,
    OperatorKind.ENDS_WITH: str.endswith,
    OperatorKind.CONTAINS: lambda s, part: part in s,
}


def _require(value: Any, expected: str) -> None:
    if kind_of(value) != expected:
        raise TypeMismatch(expected, describe(value))


def _children(filters: Iterable[Filter], root: Any, settings: Settings) -> Iterator[bool]:
    for child in filters:
        yield _check(child, root, settings)


def apply_operator(
    op: Operator,
    value: Any,
    *,
    root: Any = None,
    settings: Optional[Settings] = None,
) -> bool:
    """
    Type-check `value` for `op` and evaluate it.

    And/Or children are checked against `root` (the value handed to the
    enclosing check); when no root is given they see `value` itself.
    Raises TypeMismatch when the value kind does not suit the operator.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    kind = op.kind

    if kind in _NUMERIC:
        _require(value, NUMBER)
        return _NUMERIC[kind](as_float(value), op.operand)

    if kind == OperatorKind.EQUALS:
        return values_equal(value, op.operand)
    if kind == OperatorKind.NOT_EQUAL:
        return not values_equal(value, op.operand)

    if kind in _STRING:
        _require(value, STRING)
        return _STRING[kind](value, op.operand)

    if kind == OperatorKind.ARRAY_CONTAINS:
        _require(value, ARRAY)
        return any(values_equal(item, op.operand) for item in value)

    if kind == OperatorKind.HAS_KEY:
        _require(value, OBJECT)
        return op.operand in value

    if kind in (OperatorKind.AND, OperatorKind.OR):
        target = value if root is None else root
        results = _children(op.operand, target, settings)
        if not settings.short_circuit:
            # evaluate every child first so an error anywhere surfaces
            results = iter(list(results))
        return all(results) if kind == OperatorKind.AND else any(results)

    raise ValueError(f"Unsupported operator: {kind}")


def _check(flt: Filter, value: Any, settings: Settings) -> bool:
    target = resolve_path(flt.path, value)
    return apply_operator(flt.operator, target, root=value, settings=settings)


def check(flt: Filter, value: Any, *, settings: Optional[Settings] = None) -> bool:
    """
    Resolve `flt.path` inside `value`, then apply `flt.operator` to it.

    Any FilterError aborts evaluation and propagates; there is no
    default-to-false.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    assert_depth_within(flt, settings.max_depth)
    try:
        return _check(flt, value, settings)
    except FilterError as e:
        log.debug("filter on path %r could not be evaluated: %s", flt.path, e)
        raise


def select(
    flt: Filter,
    values: Iterable[Any],
    *,
    settings: Optional[Settings] = None,
) -> Iterator[Any]:
    """Yield the values that satisfy `flt`; evaluation errors propagate."""
    if settings is None:
        settings = DEFAULT_SETTINGS
    assert_depth_within(flt, settings.max_depth)
    for value in values:
        if _check(flt, value, settings):
            yield value
