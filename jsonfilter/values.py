from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

# Kind names double as the `expected` text of TypeMismatch errors.
NULL = "null"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"


def kind_of(v: Any) -> str:
    # bool before number: bool is a subclass of int.
    if v is None:
        return NULL
    if isinstance(v, bool):
        return BOOLEAN
    if isinstance(v, (int, float, Decimal)):
        return NUMBER
    if isinstance(v, str):
        return STRING
    if isinstance(v, (list, tuple)):
        return ARRAY
    if isinstance(v, Mapping):
        return OBJECT
    raise TypeError(f"Not a JSON value: {type(v).__name__}")


def is_number(v: Any) -> bool:
    return isinstance(v, (int, float, Decimal)) and not isinstance(v, bool)


def as_float(v: Any) -> float:
    try:
        return float(v)
    except OverflowError:
        # ints beyond the float64 range saturate, as a float64 parser would
        return math.inf if v > 0 else -math.inf


def values_equal(a: Any, b: Any) -> bool:
    """
    Structural equality over the JSON data model.

    Kinds must match, so True != 1 and "1" != 1. Numbers compare as
    float64 (two ints compare exactly), arrays element-wise in order,
    objects by key set and value.
    """
    kind = kind_of(a)
    if kind != kind_of(b):
        return False
    if kind == NUMBER:
        if isinstance(a, int) and isinstance(b, int):
            return a == b
        return as_float(a) == as_float(b)
    if kind == ARRAY:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if kind == OBJECT:
        if len(a) != len(b):
            return False
        for key, item in a.items():
            if key not in b or not values_equal(item, b[key]):
                return False
        return True
    return a == b


def _float_text(x: float) -> str:
    # 1e16 rather than 1e+16, 1e-7 rather than 1e-07
    text = repr(x)
    if "e" in text:
        mantissa, exp = text.split("e")
        text = f"{mantissa}e{int(exp)}"
    return text


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def describe(v: Any) -> str:
    """
    Debug snapshot of a value, e.g. String("25") or Object {"a": Number(1)}.
    """
    kind = kind_of(v)
    if kind == NULL:
        return "Null"
    if kind == BOOLEAN:
        return "Bool(true)" if v else "Bool(false)"
    if kind == NUMBER:
        text = _float_text(v) if isinstance(v, float) else str(v)
        return f"Number({text})"
    if kind == STRING:
        return f"String({_quote(v)})"
    if kind == ARRAY:
        return "Array [" + ", ".join(describe(x) for x in v) + "]"
    items = ", ".join(f"{_quote(str(k))}: {describe(x)}" for k, x in v.items())
    return "Object {" + items + "}"
