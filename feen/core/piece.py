from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import NotationSyntaxError
from .types import Side, is_letter, is_prefix, is_suffix, side_of

@dataclass(frozen=True)
class Piece:
    """One piece token: ``[prefix] letter [suffix]``.

    The letter is case-significant; its case tells which side owns the piece.
    """

    letter: str
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.letter, str) or len(self.letter) != 1 or not is_letter(self.letter):
            raise NotationSyntaxError(f"Bad piece letter: {self.letter!r}")
        if self.prefix is not None and not is_prefix(self.prefix):
            raise NotationSyntaxError(f"Bad piece prefix: {self.prefix!r}")
        if self.suffix is not None and not is_suffix(self.suffix):
            raise NotationSyntaxError(f"Bad piece suffix: {self.suffix!r}")

    @classmethod
    def from_token(cls, token: str) -> "Piece":
        token = token.strip()
        i = 0
        prefix = None
        if i < len(token) and is_prefix(token[i]):
            prefix = token[i]
            i += 1
        if i >= len(token) or not is_letter(token[i]):
            raise NotationSyntaxError(f"Bad piece token: {token!r}", position=i)
        letter = token[i]
        i += 1
        suffix = None
        if i < len(token) and is_suffix(token[i]):
            suffix = token[i]
            i += 1
        if i != len(token):
            raise NotationSyntaxError(f"Bad piece token: {token!r}", position=i)
        return cls(letter, prefix, suffix)

    @property
    def side(self) -> Side:
        return side_of(self.letter)

    def __str__(self) -> str:
        return f"{self.prefix or ''}{self.letter}{self.suffix or ''}"
