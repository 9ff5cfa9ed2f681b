from typing import Iterator, Optional

from ..filters import Filter, FilterDepthExceeded


def iter_filters(flt: Filter) -> Iterator[Filter]:
    """Yield every node of the filter tree, parents before children."""
    stack = [flt]
    while stack:
        node = stack.pop()
        yield node
        if node.operator.is_logical:
            stack.extend(reversed(node.operator.operand))


def filter_depth(flt: Filter) -> int:
    # iterative so that measuring a pathological tree cannot itself overflow
    deepest = 0
    stack = [(flt, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if node.operator.is_logical:
            stack.extend((child, depth + 1) for child in node.operator.operand)
    return deepest


def assert_depth_within(flt: Filter, max_depth: Optional[int]) -> None:
    if max_depth is None:
        return
    depth = filter_depth(flt)
    if depth > max_depth:
        raise FilterDepthExceeded(depth, max_depth)
