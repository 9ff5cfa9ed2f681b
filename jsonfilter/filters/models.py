from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union
import json

import jsonschema

from ..values import as_float, is_number, values_equal

if TYPE_CHECKING:
    from ..config import Settings

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class OperatorKind(str, Enum):
    GREATER_THAN = "GreaterThan"
    LESS_THAN = "LessThan"
    GREATER_OR_EQUAL = "GreaterOrEqual"
    LESS_OR_EQUAL = "LessOrEqual"
    EQUALS = "Equals"
    NOT_EQUAL = "NotEqual"
    STARTS_WITH = "StartsWith"
    ENDS_WITH = "EndsWith"
    CONTAINS = "Contains"
    ARRAY_CONTAINS = "ArrayContains"
    HAS_KEY = "HasKey"
    AND = "And"
    OR = "Or"


NUMERIC_KINDS = frozenset({
    OperatorKind.GREATER_THAN,
    OperatorKind.LESS_THAN,
    OperatorKind.GREATER_OR_EQUAL,
    OperatorKind.LESS_OR_EQUAL,
})
STRING_KINDS = frozenset({
    OperatorKind.STARTS_WITH,
    OperatorKind.ENDS_WITH,
    OperatorKind.CONTAINS,
})
LOGICAL_KINDS = frozenset({OperatorKind.AND, OperatorKind.OR})


# ---------------------------------------------------------------------------
# Core filter models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Operator:
    """
    One comparison (or logical combinator) and the operand it carries.

    Numeric kinds hold a float, string kinds and HasKey hold a str,
    Equals/NotEqual/ArrayContains hold any JSON value, And/Or hold a
    tuple of child Filters.
    """
    kind: OperatorKind
    operand: Any

    # operands may be dicts or lists
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        try:
            kind = OperatorKind(self.kind)
        except ValueError:
            raise ValueError(f"Unknown operator: {self.kind}") from None
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "operand", _normalize_operand(kind, self.operand))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operator):
            return NotImplemented
        if self.kind != other.kind:
            return False
        if self.is_logical:
            return self.operand == other.operand
        return values_equal(self.operand, other.operand)

    @property
    def is_logical(self) -> bool:
        return self.kind in LOGICAL_KINDS

    # one constructor per variant
    @classmethod
    def greater_than(cls, n: float) -> "Operator":
        return cls(OperatorKind.GREATER_THAN, n)

    @classmethod
    def less_than(cls, n: float) -> "Operator":
        return cls(OperatorKind.LESS_THAN, n)

    @classmethod
    def greater_or_equal(cls, n: float) -> "Operator":
        return cls(OperatorKind.GREATER_OR_EQUAL, n)

    @classmethod
    def less_or_equal(cls, n: float) -> "Operator":
        return cls(OperatorKind.LESS_OR_EQUAL, n)

    @classmethod
    def equals(cls, value: Any) -> "Operator":
        return cls(OperatorKind.EQUALS, value)

    @classmethod
    def not_equal(cls, value: Any) -> "Operator":
        return cls(OperatorKind.NOT_EQUAL, value)

    @classmethod
    def starts_with(cls, s: str) -> "Operator":
        return cls(OperatorKind.STARTS_WITH, s)

    @classmethod
    def ends_with(cls, s: str) -> "Operator":
        return cls(OperatorKind.ENDS_WITH, s)

    @classmethod
    def contains(cls, s: str) -> "Operator":
        return cls(OperatorKind.CONTAINS, s)

    @classmethod
    def array_contains(cls, value: Any) -> "Operator":
        return cls(OperatorKind.ARRAY_CONTAINS, value)

    @classmethod
    def has_key(cls, key: str) -> "Operator":
        return cls(OperatorKind.HAS_KEY, key)

    @classmethod
    def and_(cls, filters: Sequence["Filter"]) -> "Operator":
        return cls(OperatorKind.AND, filters)

    @classmethod
    def or_(cls, filters: Sequence["Filter"]) -> "Operator":
        return cls(OperatorKind.OR, filters)

    # externally tagged JSON helpers: {"GreaterThan": 20.0}
    def to_dict(self) -> Dict[str, Any]:
        if self.is_logical:
            return {self.kind.value: [f.to_dict() for f in self.operand]}
        return {self.kind.value: self.operand}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Operator":
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(f"Operator must be a single-key object, got {data!r}")
        (name, operand), = data.items()
        try:
            kind = OperatorKind(name)
        except ValueError:
            raise ValueError(f"Unknown operator: {name}") from None
        if kind in LOGICAL_KINDS:
            if not isinstance(operand, list):
                raise ValueError(f"{name} expects a list of filters, got {operand!r}")
            operand = [Filter.from_dict(f) for f in operand]
        return cls(kind, operand)


def _normalize_operand(kind: OperatorKind, operand: Any) -> Any:
    if kind in NUMERIC_KINDS:
        if not is_number(operand):
            raise ValueError(f"{kind.value} expects a number, got {operand!r}")
        return as_float(operand)
    if kind in STRING_KINDS or kind == OperatorKind.HAS_KEY:
        if not isinstance(operand, str):
            raise ValueError(f"{kind.value} expects a string, got {operand!r}")
        return operand
    if kind in LOGICAL_KINDS:
        if isinstance(operand, (str, bytes)) or not isinstance(operand, (list, tuple)):
            raise ValueError(f"{kind.value} expects a sequence of filters, got {operand!r}")
        children = tuple(operand)
        for child in children:
            if not isinstance(child, Filter):
                raise ValueError(f"{kind.value} children must be Filter, got {child!r}")
        return children
    return operand


@dataclass(frozen=True)
class Filter:
    """
    A path into the value plus the operator applied to whatever it resolves to.
    """
    path: str
    operator: Operator

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            raise ValueError(f"Filter path must be a string, got {self.path!r}")
        if not isinstance(self.operator, Operator):
            raise ValueError(f"Filter operator must be an Operator, got {self.operator!r}")

    def check(self, value: Any, *, settings: Optional["Settings"] = None) -> bool:
        from ..evaluation import check

        return check(self, value, settings=settings)

    # JSON helpers
    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "operator": self.operator.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Filter":
        if not isinstance(data, dict):
            raise ValueError(f"Filter must be an object, got {data!r}")
        missing = [k for k in ("path", "operator") if k not in data]
        if missing:
            raise ValueError(f"Filter is missing field(s): {', '.join(missing)}")
        return cls(
            path=data["path"],
            operator=Operator.from_dict(data["operator"]),
        )


# ---------------------------------------------------------------------------
# JSON Schema for the wire form
# ---------------------------------------------------------------------------

_ANY_FILTERS = {"type": "array", "items": {"$ref": "#/$defs/Filter"}}


def _operand_schema(kind: OperatorKind) -> Dict[str, Any]:
    if kind in NUMERIC_KINDS:
        return {"type": "number"}
    if kind in STRING_KINDS or kind == OperatorKind.HAS_KEY:
        return {"type": "string"}
    if kind in LOGICAL_KINDS:
        return _ANY_FILTERS
    return {}


FILTER_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.com/jsonfilter/filter.schema.json",
    "title": "Filter",
    "$defs": {
        "Filter": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "path": {"type": "string"},
                "operator": {"$ref": "#/$defs/Operator"},
            },
            "required": ["path", "operator"],
        },
        "Operator": {
            "type": "object",
            "oneOf": [
                {
                    "properties": {kind.value: _operand_schema(kind)},
                    "required": [kind.value],
                    "additionalProperties": False,
                }
                for kind in OperatorKind
            ],
        },
    },
    "$ref": "#/$defs/Filter",
}


def _validate(instance: Dict[str, Any], schema: Dict[str, Any]) -> None:
    jsonschema.validate(instance=instance, schema=schema)


def parse_filter_json(
    payload: Union[str, bytes, Dict[str, Any]],
    *,
    validate: bool = True,
) -> Filter:
    """
    Accept a JSON string or dict and return a Filter.
    """
    data = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
    if validate:
        _validate(data, FILTER_SCHEMA)
    return Filter.from_dict(data)


def dump_filter_json(flt: Filter, **json_kwargs: Any) -> str:
    return json.dumps(flt.to_dict(), **json_kwargs)


# ---------------------------------------------------------------------------
# Public exports
# ---------------------------------------------------------------------------

__all__ = [
    "OperatorKind",
    "Operator",
    "Filter",
    "FILTER_SCHEMA",
    "parse_filter_json",
    "dump_filter_json",
]
