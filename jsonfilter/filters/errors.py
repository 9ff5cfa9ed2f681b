from __future__ import annotations

from typing import Any, Tuple


class FilterError(Exception):
    """
    Base class for failures while evaluating a filter against a value.

    Instances compare equal when they are the same kind and carry the
    same context.
    """

    def _context(self) -> Tuple[Any, ...]:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._context() == other._context()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._context()))


class PathNotFound(FilterError):
    def __init__(self, name: str):
        super().__init__(f"Path not found: {name}")
        self.name = name

    def _context(self) -> Tuple[Any, ...]:
        return (self.name,)


class TypeMismatch(FilterError):
    def __init__(self, expected: str, got: str):
        super().__init__(f"Type mismatch: expected {expected}, got {got}")
        self.expected = expected
        self.got = got

    def _context(self) -> Tuple[Any, ...]:
        return (self.expected, self.got)


class InvalidArrayIndex(FilterError):
    def __init__(self, text: str):
        super().__init__(f"Invalid array index in path: {text}")
        self.text = text

    def _context(self) -> Tuple[Any, ...]:
        return (self.text,)


class InvalidPath(FilterError):
    def __init__(self, text: str):
        super().__init__(f"Invalid path format: {text}")
        self.text = text

    def _context(self) -> Tuple[Any, ...]:
        return (self.text,)


class FilterDepthExceeded(FilterError):
    """Raised before evaluation when a filter tree nests deeper than allowed."""

    def __init__(self, depth: int, limit: int):
        super().__init__(f"Filter depth {depth} exceeds limit {limit}")
        self.depth = depth
        self.limit = limit

    def _context(self) -> Tuple[Any, ...]:
        return (self.depth, self.limit)
