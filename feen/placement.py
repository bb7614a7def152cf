"""Piece placement field: nested boards <-> ``/``-separated text.

Dimensionality is written as separator run length: one ``/`` between the
ranks of a 2D layer, ``//`` between layers of a 3D stack, and so on. Decoding
scans for the distinct run lengths first and then splits on the longest run,
so no bracket matching is needed.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from .core import NotationSyntaxError, ShapeError
from .core.board import Board
from .core.types import SEPARATOR
from .rank import decode_rank, encode_rank
from .separators import separator_runs, split_on_run
from .shape import freeze_board, validate_shape


def _reject_empty_parts(parts: List[Tuple[str, int]], length: int) -> None:
    last = len(parts) - 1
    for idx, (part, part_offset) in enumerate(parts):
        if part:
            continue
        if idx == last:
            raise NotationSyntaxError("Trailing separator", position=part_offset - length)
        if idx == 0:
            raise NotationSyntaxError("Leading separator", position=part_offset)
        raise NotationSyntaxError("Empty group between separators", position=part_offset)


def decode_placement(s: str) -> Board:
    """Parse a piece placement field into nested tuples.

    Ranks are tuples of ``Piece``/``None``; every level above is a tuple of
    sub-boards. Rank lengths may differ, nesting depth may not.
    """
    if not s:
        raise NotationSyntaxError("Empty piece placement", position=0)

    root: List[Any] = []
    positions: Dict[int, int] = {}
    work: List[Tuple[str, int, List[Any]]] = [(s, 0, root)]

    while work:
        text, offset, out = work.pop()
        runs = separator_runs(text)
        if not runs:
            rank = decode_rank(text, offset)
            positions[id(rank)] = offset
            out.append(rank)
            continue

        longest = runs[-1]
        parts = split_on_run(text, longest, offset)
        _reject_empty_parts(parts, longest)
        children: List[Any] = []
        positions[id(children)] = offset
        out.append(children)
        # pushed in reverse so parts are decoded, and appended, left to right
        for part, part_offset in reversed(parts):
            work.append((part, part_offset, children))

    return freeze_board(root[0], positions)


def encode_placement(board: Sequence) -> str:
    """Serialize a nested board; children at depth d are joined by D - d separators.

    Every group must hold at least two sub-boards, so that the text decodes
    back to the same board.
    """
    dims = validate_shape(board)
    encoded: Dict[int, str] = {}
    stack: List[Tuple[Sequence, int, bool]] = [(board, 0, False)]

    while stack:
        node, depth, ready = stack.pop()
        key = id(node)
        if key in encoded:
            continue
        if depth == dims - 1:
            encoded[key] = encode_rank(node)
            continue
        if not ready:
            # a single child is written without any separator and reads back one level shallower
            if len(node) == 1:
                raise ShapeError(f"Group at depth {depth} has a single sub-board and cannot be written")
            stack.append((node, depth, True))
            stack.extend((child, depth + 1, False) for child in node)
            continue
        encoded[key] = (SEPARATOR * (dims - depth - 1)).join(encoded[id(child)] for child in node)

    return encoded[id(board)]
