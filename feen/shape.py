from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple

from .core import ShapeError
from .core.board import Board, MIXED, RANK, node_kind


def validate_shape(board: Sequence, positions: Optional[Mapping[int, int]] = None) -> int:
    """Check that sibling sub-boards share one nesting depth.

    Returns the dimension count. Rank lengths are not compared: irregular
    boards are valid. ``positions`` maps ``id(node)`` to the offset the node
    was decoded from, for error reporting.
    """
    positions = positions or {}
    depth: Dict[int, int] = {}
    visiting: Set[int] = set()
    stack: List[Tuple[Sequence, bool]] = [(board, False)]

    while stack:
        node, ready = stack.pop()
        key = id(node)
        if key in depth:
            continue
        kind = node_kind(node)
        if kind == MIXED:
            raise ShapeError("Board node mixes cells and sub-boards", position=positions.get(key))
        if not node:
            raise ShapeError("Board node is empty", position=positions.get(key))
        if kind == RANK:
            depth[key] = 1
            continue

        if not ready:
            if key in visiting:
                raise ShapeError("Board contains itself")
            visiting.add(key)
            stack.append((node, True))
            for child in reversed(node):
                if id(child) in visiting:
                    raise ShapeError("Board contains itself")
                stack.append((child, False))
            continue

        visiting.discard(key)
        expected = depth[id(node[0])]
        for child in node[1:]:
            got = depth[id(child)]
            if got != expected:
                raise ShapeError(
                    f"Sibling boards differ in depth: expected {expected} dimension(s), got {got}",
                    position=positions.get(id(child)),
                )
        depth[key] = expected + 1

    return depth[id(board)]


def freeze_board(board: Sequence, positions: Optional[Mapping[int, int]] = None) -> Board:
    """Validate ``board`` and return it as nested tuples."""
    validate_shape(board, positions)
    done: Dict[int, Board] = {}
    stack: List[Tuple[Sequence, bool]] = [(board, False)]
    while stack:
        node, ready = stack.pop()
        key = id(node)
        if key in done:
            continue
        if node_kind(node) == RANK:
            done[key] = tuple(node)
            continue
        if not ready:
            stack.append((node, True))
            stack.extend((child, False) for child in node)
            continue
        done[key] = tuple(done[id(child)] for child in node)
    return done[id(board)]
