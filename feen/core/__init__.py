from .types import Side, SEPARATOR, FIELD_SEPARATOR, PREFIXES, SUFFIXES, MAX_HAND_COUNT, MAX_EMPTY_RUN, side_of
from .errors import (
    NotationError, NotationSyntaxError, ShapeError, CountError, CanonicalOrderError, StyleError,
)
from .piece import Piece

__all__ = [
    "Side","SEPARATOR","FIELD_SEPARATOR","PREFIXES","SUFFIXES","MAX_HAND_COUNT","MAX_EMPTY_RUN","side_of",
    "NotationError","NotationSyntaxError","ShapeError","CountError","CanonicalOrderError","StyleError",
    "Piece",
]
