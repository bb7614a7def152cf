"""JSON-friendly boundary for UIs and services.

Plain dicts/lists only:
- position snapshots and their inverse
- flat cell list and occupied-cell index views of a board
- text rendering for terminals
"""

from .serde import (
    position_to_dict, dict_to_position, board_to_json, board_from_json,
    flatten, occupied_index, ascii_board,
)

__all__ = [
    "position_to_dict", "dict_to_position", "board_to_json", "board_from_json",
    "flatten", "occupied_index", "ascii_board",
]
