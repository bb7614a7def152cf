from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence, TypeVar, Union

from .core import NotationError, NotationSyntaxError
from .core.types import FIELD_SEPARATOR
from .hand import Hands, HandItem, decode_hands, encode_hands
from .placement import decode_placement, encode_placement
from .position import Position
from .shape import freeze_board
from .style_turn import StyleTurn, parse_style_turn

LOGGER = logging.getLogger("feen.notation")

STARTPOS_FEEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR / C/c"

FIELD_NAMES = ("placement", "hands", "style_turn")

T = TypeVar("T")


def _field(name: str, fn: Callable[[Any], T], value: Any) -> T:
    try:
        return fn(value)
    except NotationError as exc:
        LOGGER.debug("feen_field_rejected", extra={"field": name, "error": exc.message, "position": exc.position})
        raise exc.in_field(name)


def _style_turn(value: Union[StyleTurn, str]) -> StyleTurn:
    if isinstance(value, StyleTurn):
        return value
    if isinstance(value, str):
        return parse_style_turn(value)
    raise TypeError(f"expected StyleTurn or str for style_turn, got {type(value).__name__}")


def _hands(value: Union[Hands, str, Iterable[HandItem]]) -> Hands:
    if isinstance(value, Hands):
        return value
    if isinstance(value, str):
        return decode_hands(value)
    return Hands.of(value)


def _placement(value: Union[str, Sequence]) -> Any:
    if isinstance(value, str):
        return decode_placement(value)
    return freeze_board(value)


def parse(text: str) -> Position:
    """Parse a full FEEN string: ``placement hands style_turn``.

    Raises a ``NotationError`` subclass on any rejected field; nothing is
    returned for partially valid input.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    fields = text.split()
    if len(fields) != len(FIELD_NAMES):
        LOGGER.debug("feen_parse_rejected", extra={"fields": len(fields)})
        raise NotationSyntaxError(f"FEEN must have {len(FIELD_NAMES)} space-separated fields, got {len(fields)}")

    placement_text, hands_text, style_text = fields
    placement = _field("placement", decode_placement, placement_text)
    hands = _field("hands", decode_hands, hands_text)
    style_turn = _field("style_turn", parse_style_turn, style_text)
    return Position(placement, hands, style_turn)


def dump(placement: Sequence, hands: Union[Hands, Iterable[HandItem]], style_turn: Union[StyleTurn, str]) -> str:
    """Serialize the three fields to one canonical FEEN string.

    ``hands`` may be a ``Hands`` value or any iterable of pieces / hand
    entries, which is split by letter case.
    """
    return FIELD_SEPARATOR.join(
        (
            _field("placement", encode_placement, placement),
            _field("hands", encode_hands, hands),
            _field("style_turn", lambda v: str(_style_turn(v)), style_turn),
        )
    )


def dump_position(position: Position) -> str:
    if not isinstance(position, Position):
        raise TypeError(f"expected Position, got {type(position).__name__}")
    return dump(position.placement, position.hands, position.style_turn)


def normalize(text: str) -> str:
    """Parse then dump; collapses sparse separator runs in the placement."""
    return dump_position(parse(text))


def is_valid(text: str) -> bool:
    try:
        parse(text)
    except NotationError:
        return False
    return True


def build(
    placement: Union[str, Sequence],
    hands: Union[Hands, str, Iterable[HandItem]] = (),
    style_turn: Union[StyleTurn, str] = "C/c",
) -> Position:
    """Assemble a Position from field strings and/or values."""
    return Position(
        _field("placement", _placement, placement),
        _field("hands", _hands, hands),
        _field("style_turn", _style_turn, style_turn),
    )
