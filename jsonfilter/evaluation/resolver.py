from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Tuple
import re

from ..filters import InvalidArrayIndex, InvalidPath, PathNotFound, TypeMismatch
from ..values import ARRAY, describe

IDENTITY_PATH = "."

# usize-style: ASCII digits, optional leading '+', no sign or whitespace otherwise
_INDEX_RE = re.compile(r"\+?[0-9]+")


def _lookup(current: Any, key: str) -> Any:
    """
    Descend by key. A non-object behaves exactly like a missing key.
    """
    if not isinstance(current, Mapping) or key not in current:
        raise PathNotFound(key)
    return current[key]


def _split_indexed_segment(segment: str) -> Tuple[str, int]:
    """
    Split 'field[3]' into ('field', 3). The field part may be empty.
    """
    bracket = segment.find("[")
    if bracket < 0:
        raise InvalidPath(segment)
    field = segment[:bracket]
    index_text = segment[bracket + 1:-1]
    if not _INDEX_RE.fullmatch(index_text):
        raise InvalidArrayIndex(index_text)
    return field, int(index_text)


def resolve_path(path: str, root: Any) -> Any:
    """
    Walk a dotted/indexed path ('user.tags[1].name') into a JSON value.

    Returns the node itself, never a copy. '.' returns the root unchanged.
    """
    if path == IDENTITY_PATH:
        return root

    current = root
    for segment in path.split("."):
        if "[" in segment and segment.endswith("]"):
            # index text is validated before the field is looked up
            field, index = _split_indexed_segment(segment)
            if field:
                current = _lookup(current, field)
            if not isinstance(current, (list, tuple)):
                raise TypeMismatch(ARRAY, describe(current))
            if index >= len(current):
                raise InvalidArrayIndex(str(index))
            current = current[index]
        else:
            current = _lookup(current, segment)

    return current
