"""FEEN: board game positions as compact text.

- core: piece tokens, board node types, error classes, grammar constants
- rank/separators/placement/shape: the piece placement field (any dimension)
- hand: pieces held off-board, canonical multiset form
- style_turn: game styles and side to move
- notation: parse/dump of the full three-field string
- api: JSON-friendly views
"""

from . import core, api
from .core import (
    Piece, Side,
    NotationError, NotationSyntaxError, ShapeError, CountError, CanonicalOrderError, StyleError,
)
from .rank import encode_rank, decode_rank
from .separators import separator_runs, split_on_run
from .placement import encode_placement, decode_placement
from .shape import validate_shape, freeze_board
from .hand import HandEntry, Hands, encode_hand, decode_hand, encode_hands, decode_hands
from .style_turn import StyleTurn, parse_style_turn, dump_style_turn
from .position import Position
from .notation import STARTPOS_FEEN, parse, dump, dump_position, normalize, is_valid, build

__all__ = [
    "core","api",
    "Piece","Side",
    "NotationError","NotationSyntaxError","ShapeError","CountError","CanonicalOrderError","StyleError",
    "encode_rank","decode_rank",
    "separator_runs","split_on_run",
    "encode_placement","decode_placement",
    "validate_shape","freeze_board",
    "HandEntry","Hands","encode_hand","decode_hand","encode_hands","decode_hands",
    "StyleTurn","parse_style_turn","dump_style_turn",
    "Position",
    "STARTPOS_FEEN","parse","dump","dump_position","normalize","is_valid","build",
]
