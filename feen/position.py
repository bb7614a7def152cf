from __future__ import annotations

from dataclasses import dataclass

from .core.board import Board
from .core.types import Side
from .hand import Hands
from .style_turn import StyleTurn


@dataclass(frozen=True)
class Position:
    placement: Board
    hands: Hands
    style_turn: StyleTurn

    @property
    def turn(self) -> Side:
        return self.style_turn.turn

    def __str__(self) -> str:
        from .notation import dump  # lazy import
        return dump(self.placement, self.hands, self.style_turn)
