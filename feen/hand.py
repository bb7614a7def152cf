"""Pieces held off-board.

A hand is a multiset of piece tokens written as ``[count]token`` entries with
no separator between them, e.g. ``3P2BK``. The only accepted spelling is the
canonical one: entries sorted by count descending, then by token text in
ascending code point order (so ``+P`` < ``-P`` < ``P`` < ``P'``), each
distinct token appearing once, and counts of 1 left implicit. Decoding
re-encodes what it read and rejects any byte difference.

The two-sided form splits the multiset by letter case: uppercase pieces, a
``/``, then lowercase pieces (``2P/p``; empty hands are ``/``).
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Dict, Iterable, List, Tuple, Union

from .core import Piece, Side, NotationSyntaxError, CountError, CanonicalOrderError
from .core.types import MAX_HAND_COUNT, PREFIXES, SEPARATOR, SUFFIXES, is_digit, is_prefix, side_of

_ENTRY = re.compile(
    "([0-9]+)?"
    "([" + re.escape(PREFIXES) + "])?"
    "([A-Za-z])"
    "([" + re.escape(SUFFIXES) + "])?"
)


@dataclass(frozen=True)
class HandEntry:
    piece: Piece
    count: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.piece, Piece):
            raise TypeError(f"Hand entry piece must be a Piece, got {type(self.piece).__name__}")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"Hand entry count must be an int, got {type(self.count).__name__}")
        if self.count < 1:
            raise CountError(f"Piece count must be at least 1, got {self.count}")
        if self.count > MAX_HAND_COUNT:
            raise CountError(f"Piece count too large: {self.count} > {MAX_HAND_COUNT}")

    def __str__(self) -> str:
        return str(self.piece) if self.count == 1 else f"{self.count}{self.piece}"


HandItem = Union[HandEntry, Piece, str]


def _as_entry(item: HandItem) -> HandEntry:
    if isinstance(item, HandEntry):
        return item
    if isinstance(item, Piece):
        return HandEntry(item)
    if isinstance(item, str):
        return HandEntry(Piece.from_token(item))
    raise TypeError(f"Hand item must be a HandEntry, Piece or token string, got {type(item).__name__}")


def canonical_key(entry: HandEntry) -> Tuple[int, str]:
    return (-entry.count, str(entry.piece))


def canonical_sort(entries: Iterable[HandEntry]) -> Tuple[HandEntry, ...]:
    return tuple(sorted(entries, key=canonical_key))


def collapse(items: Iterable[HandItem]) -> Tuple[HandEntry, ...]:
    """Merge identical tokens into counted entries, in canonical order."""
    counts: Dict[Piece, int] = {}
    for item in items:
        entry = _as_entry(item)
        counts[entry.piece] = counts.get(entry.piece, 0) + entry.count
    return canonical_sort(HandEntry(piece, n) for piece, n in counts.items())


def expand(entries: Iterable[HandItem]) -> Tuple[Piece, ...]:
    out: List[Piece] = []
    for item in entries:
        entry = _as_entry(item)
        out.extend([entry.piece] * entry.count)
    return tuple(out)


def partition_by_case(items: Iterable[HandItem]) -> Tuple[List[HandEntry], List[HandEntry]]:
    """Split hand items into (uppercase, lowercase) by piece letter."""
    first: List[HandEntry] = []
    second: List[HandEntry] = []
    for item in items:
        entry = _as_entry(item)
        (first if side_of(entry.piece.letter) is Side.FIRST else second).append(entry)
    return first, second


def encode_hand(items: Iterable[HandItem]) -> str:
    return "".join(str(entry) for entry in collapse(items))


def _syntax_error(s: str, pos: int, offset: int) -> NotationSyntaxError:
    i = pos
    while i < len(s) and is_digit(s[i]):
        i += 1
    if i >= len(s):
        return NotationSyntaxError("Piece count without a piece", position=offset + pos)
    if is_prefix(s[i]):
        return NotationSyntaxError(f"Prefix {s[i]!r} without a piece letter", position=offset + i)
    return NotationSyntaxError(f"Unexpected character {s[i]!r} in hand", position=offset + i)


def _scan(s: str, offset: int = 0) -> List[Tuple[int, HandEntry]]:
    """Read ``(position, entry)`` pairs in written order, checking grammar and counts only."""
    entries: List[Tuple[int, HandEntry]] = []
    pos = 0
    while pos < len(s):
        m = _ENTRY.match(s, pos)
        if m is None:
            raise _syntax_error(s, pos, offset)
        count_text = m.group(1)
        count = 1
        if count_text is not None:
            if count_text[0] == "0":
                if len(count_text) == 1:
                    raise CountError("Piece count must not be 0", position=offset + pos)
                raise CountError(f"Piece count {count_text!r} has a leading zero", position=offset + pos)
            if count_text == "1":
                raise CountError("Piece count 1 must be left implicit", position=offset + pos)
            if len(count_text) > len(str(MAX_HAND_COUNT)) or int(count_text) > MAX_HAND_COUNT:
                raise CountError(f"Piece count exceeds {MAX_HAND_COUNT}", position=offset + pos)
            count = int(count_text)
        piece = Piece(m.group(3), m.group(2), m.group(4))
        entries.append((offset + pos, HandEntry(piece, count)))
        pos = m.end()
    return entries


def _first_difference(a: str, b: str) -> int:
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    return min(len(a), len(b))


def _require_canonical(s: str, canonical: str, offset: int = 0) -> None:
    if canonical != s:
        raise CanonicalOrderError(
            f"Hand {s!r} is not in canonical order, expected {canonical!r}",
            expected=canonical,
            position=offset + _first_difference(s, canonical),
        )


def _check_totals(scanned: List[Tuple[int, HandEntry]]) -> List[HandEntry]:
    """Entries of ``scanned``; fails at the entry whose repeat pushes a total past the cap."""
    totals: Dict[Piece, int] = {}
    for pos, entry in scanned:
        total = totals.get(entry.piece, 0) + entry.count
        if total > MAX_HAND_COUNT:
            raise CountError(f"{entry.piece} is held {total} times, more than {MAX_HAND_COUNT}", position=pos)
        totals[entry.piece] = total
    return [entry for _, entry in scanned]


def decode_hand(s: str, offset: int = 0) -> Tuple[HandEntry, ...]:
    """Parse one hand segment; only the canonical spelling is accepted."""
    entries = _check_totals(_scan(s, offset))
    _require_canonical(s, encode_hand(entries), offset)
    return tuple(entries)


@dataclass(frozen=True)
class Hands:
    """Both sides' hands: uppercase pieces first, lowercase pieces second."""

    first: Tuple[HandEntry, ...] = ()
    second: Tuple[HandEntry, ...] = ()

    def __post_init__(self) -> None:
        first = collapse(self.first)
        second = collapse(self.second)
        for side, entries in ((Side.FIRST, first), (Side.SECOND, second)):
            for entry in entries:
                if entry.piece.side is not side:
                    raise CanonicalOrderError(
                        f"Piece {entry.piece} is held in the {side.name.lower()} hand",
                        expected=encode_hands(Hands.of(first + second)),
                    )
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "second", second)

    @classmethod
    def of(cls, items: Iterable[HandItem]) -> "Hands":
        first, second = partition_by_case(items)
        return cls(tuple(first), tuple(second))

    def hand_of(self, side: Side) -> Tuple[HandEntry, ...]:
        return self.first if side is Side.FIRST else self.second

    def is_empty(self) -> bool:
        return not self.first and not self.second

    def pieces(self) -> Tuple[Piece, ...]:
        return expand(self.first + self.second)

    def __str__(self) -> str:
        return encode_hands(self)


def encode_hands(hands: Union[Hands, Iterable[HandItem]]) -> str:
    """Two-sided form of a ``Hands`` value, or of loose items split by letter case."""
    if not isinstance(hands, Hands):
        hands = Hands.of(hands)
    return f"{encode_hand(hands.first)}{SEPARATOR}{encode_hand(hands.second)}"


def decode_hands(s: str) -> Hands:
    """Parse the two-sided hands field (``UPPER/lower``), strictly canonical."""
    seps = s.count(SEPARATOR)
    if seps != 1:
        pos = s.find(SEPARATOR, s.find(SEPARATOR) + 1) if seps else len(s)
        raise NotationSyntaxError(f"Hands must contain exactly one {SEPARATOR!r}, got {seps}", position=pos)

    first_text, second_text = s.split(SEPARATOR)
    scanned = _scan(first_text) + _scan(second_text, len(first_text) + 1)
    hands = Hands.of(_check_totals(scanned))
    _require_canonical(s, encode_hands(hands))
    return hands
