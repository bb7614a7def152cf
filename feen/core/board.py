from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from .piece import Piece

Cell = Optional[Piece]
Rank = Tuple[Cell, ...]
Board = Union[Rank, Tuple["Board", ...]]

RANK = "rank"
GROUP = "group"
MIXED = "mixed"

def node_kind(node: object) -> str:
    """Classify one board node as ``RANK`` or ``GROUP``.

    Raises TypeError for objects that cannot be part of a board. Empty
    nodes classify as ``RANK``; the shape validator rejects them.
    """
    if not isinstance(node, (tuple, list)):
        raise TypeError(f"Board node must be a tuple or list, got {type(node).__name__}")
    if not node:
        return RANK
    has_cells = False
    has_nodes = False
    for item in node:
        if item is None or isinstance(item, Piece):
            has_cells = True
        elif isinstance(item, (tuple, list)):
            has_nodes = True
        else:
            raise TypeError(f"Board element must be a Piece, None or a sub-board, got {type(item).__name__}")
    if has_cells and has_nodes:
        return MIXED
    return RANK if has_cells else GROUP

def is_rank(node: object) -> bool:
    return node_kind(node) == RANK

def dimension_count(board: Sequence) -> int:
    n = 1
    node = board
    while node_kind(node) == GROUP:
        node = node[0]
        n += 1
    return n

def board_shape(board: Sequence) -> List[int]:
    """Sizes along the first path from the root down to a rank."""
    shape = [len(board)]
    node = board
    while node_kind(node) == GROUP:
        node = node[0]
        shape.append(len(node))
    return shape
