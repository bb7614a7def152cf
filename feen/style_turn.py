from __future__ import annotations

from dataclasses import dataclass
import re

from .core import Side, StyleError, NotationSyntaxError
from .core.types import SEPARATOR

_IDENT = re.compile(r"[A-Za-z][A-Za-z0-9]*\Z")
_STYLE_TURN = re.compile(r"([^/]*)/([^/]*)\Z")


def _case_of(ident: str, position: int = 0) -> Side:
    letters = [ch for ch in ident if ch.isalpha()]
    if all(ch.isupper() for ch in letters):
        return Side.FIRST
    if all(ch.islower() for ch in letters):
        return Side.SECOND
    raise StyleError(f"Style identifier {ident!r} mixes upper and lower case", position=position)


def _check_ident(ident: str, position: int) -> Side:
    if not _IDENT.match(ident):
        raise StyleError(f"Bad style identifier {ident!r}", position=position)
    return _case_of(ident, position)


@dataclass(frozen=True)
class StyleTurn:
    """Game styles of both sides, the side to move first.

    Uppercase identifiers belong to the first side, lowercase ones to the
    second; exactly one of the two is uppercase.
    """

    active: str
    inactive: str

    def __post_init__(self) -> None:
        a = _check_ident(self.active, 0)
        b = _check_ident(self.inactive, len(self.active) + 1)
        if a is b:
            raise StyleError("Exactly one style identifier must be uppercase")

    @property
    def turn(self) -> Side:
        return _case_of(self.active)

    def style_of(self, side: Side) -> str:
        return self.active if self.turn is side else self.inactive

    def __str__(self) -> str:
        return f"{self.active}{SEPARATOR}{self.inactive}"


def parse_style_turn(s: str) -> StyleTurn:
    m = _STYLE_TURN.match(s)
    if m is None:
        pos = s.find(SEPARATOR)
        raise NotationSyntaxError(
            f"Style/turn field must be two identifiers joined by {SEPARATOR!r}",
            position=len(s) if pos < 0 else s.find(SEPARATOR, pos + 1),
        )
    return StyleTurn(m.group(1), m.group(2))


def dump_style_turn(style_turn: StyleTurn) -> str:
    if not isinstance(style_turn, StyleTurn):
        raise TypeError(f"expected StyleTurn, got {type(style_turn).__name__}")
    return str(style_turn)
