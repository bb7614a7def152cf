from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..core import Piece, Side
from ..core.board import board_shape, dimension_count, is_rank
from ..hand import HandEntry, Hands
from ..position import Position
from ..shape import freeze_board, validate_shape
from ..style_turn import StyleTurn


LOGGER = logging.getLogger("feen.api.serde")

_KNOWN_KEYS = {"placement", "hands", "style_turn", "dimensions", "shape", "feen"}


def _cell_to_json(cell: Optional[Piece]) -> Optional[str]:
    return None if cell is None else str(cell)


def _cell_from_json(value: Any) -> Optional[Piece]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"Bad cell value: {value!r}")
    return Piece.from_token(value)


def board_to_json(board: Sequence) -> List[Any]:
    if is_rank(board):
        return [_cell_to_json(c) for c in board]
    return [board_to_json(child) for child in board]


def board_from_json(data: Sequence) -> Any:
    def convert(node: Any) -> Any:
        if not isinstance(node, list):
            raise ValueError(f"Bad board node: {node!r}")
        if node and all(isinstance(item, list) for item in node):
            return [convert(item) for item in node]
        return [_cell_from_json(item) for item in node]

    return freeze_board(convert(data))


def _entries_to_json(entries: Sequence[HandEntry]) -> List[Dict[str, Any]]:
    return [{"piece": str(e.piece), "count": e.count} for e in entries]


def _entries_from_json(items: Sequence[Dict[str, Any]]) -> List[HandEntry]:
    out = []
    for item in items:
        out.append(HandEntry(Piece.from_token(str(item["piece"])), int(item.get("count", 1))))
    return out


def position_to_dict(position: Position) -> Dict[str, Any]:
    """JSON-friendly view of a position."""
    st = position.style_turn
    return {
        "placement": board_to_json(position.placement),
        "dimensions": dimension_count(position.placement),
        "shape": board_shape(position.placement),
        "hands": {side.name.lower(): _entries_to_json(position.hands.hand_of(side)) for side in Side},
        "style_turn": {"active": st.active, "inactive": st.inactive, "turn": st.turn.name},
        "feen": str(position),
    }


def dict_to_position(d: Dict[str, Any]) -> Position:
    """Rebuild a Position from ``position_to_dict`` output.

    Derived keys (``dimensions``, ``shape``, ``feen``) are ignored.
    """
    unknown = set(d) - _KNOWN_KEYS
    if unknown:
        LOGGER.warning("dict_to_position_ignored_keys", extra={"keys": sorted(unknown)})

    try:
        placement = board_from_json(d["placement"])
        hands_d = d.get("hands") or {}
        st = d["style_turn"]
    except KeyError as exc:
        raise ValueError(f"Missing position key: {exc.args[0]}") from None

    hands = Hands(
        tuple(_entries_from_json(hands_d.get("first", []))),
        tuple(_entries_from_json(hands_d.get("second", []))),
    )
    return Position(placement, hands, StyleTurn(str(st["active"]), str(st["inactive"])))


def flatten(board: Sequence) -> List[Optional[Piece]]:
    """All cells in reading order (first rank first)."""
    validate_shape(board)
    out: List[Optional[Piece]] = []
    stack = [board]
    while stack:
        node = stack.pop()
        if is_rank(node):
            out.extend(node)
        else:
            stack.extend(reversed(node))
    return out


def occupied_index(board: Sequence) -> Dict[int, str]:
    """``{flat_index: token}`` for every occupied cell."""
    return {i: str(cell) for i, cell in enumerate(flatten(board)) if cell is not None}


def ascii_board(board: Sequence) -> str:
    dims = validate_shape(board)

    def render(node: Sequence, depth: int) -> str:
        if depth == dims - 1:
            return " ".join(str(c) if c is not None else "." for c in node)
        return ("\n" * (dims - depth - 1)).join(render(child, depth + 1) for child in node)

    return render(board, 0)
