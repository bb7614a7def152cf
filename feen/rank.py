from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .core import Piece, NotationSyntaxError, ShapeError
from .core.types import MAX_EMPTY_RUN, SEPARATOR, is_digit, is_letter, is_prefix, is_suffix

Cell = Optional[Piece]
Rank = Tuple[Cell, ...]


def _empty_run(n: int) -> str:
    if n > MAX_EMPTY_RUN:
        raise ShapeError(f"{n} consecutive empty cells, at most {MAX_EMPTY_RUN} can be written")
    return str(n)


def encode_rank(cells: Sequence[Cell]) -> str:
    """Encode one 1-D run of cells, collapsing empty cells into counts."""
    if len(cells) == 0:
        raise ShapeError("Rank must contain at least one cell")
    out: List[str] = []
    empty = 0
    for cell in cells:
        if cell is None:
            empty += 1
            continue
        if not isinstance(cell, Piece):
            raise TypeError(f"Rank cell must be a Piece or None, got {type(cell).__name__}")
        if empty:
            out.append(_empty_run(empty))
            empty = 0
        out.append(str(cell))
    if empty:
        out.append(_empty_run(empty))
    return "".join(out)


def decode_rank(s: str, offset: int = 0) -> Rank:
    """Decode one rank; ``offset`` is where ``s`` starts in the whole field."""
    if not s:
        raise NotationSyntaxError("Empty rank", position=offset)

    cells: List[Cell] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        if is_digit(ch):
            start = i
            while i < n and is_digit(s[i]):
                i += 1
            run = s[start:i]
            if run[0] == "0":
                raise NotationSyntaxError(f"Bad empty-cell count {run!r}", position=offset + start)
            if len(run) > len(str(MAX_EMPTY_RUN)) or int(run) > MAX_EMPTY_RUN:
                raise NotationSyntaxError(f"Empty-cell count exceeds {MAX_EMPTY_RUN}", position=offset + start)
            cells.extend([None] * int(run))
            continue

        start = i
        prefix = None
        if is_prefix(ch):
            prefix = ch
            i += 1
        if i >= n or not is_letter(s[i]):
            if prefix is not None:
                raise NotationSyntaxError(f"Prefix {prefix!r} without a piece letter", position=offset + start)
            if ch == SEPARATOR:
                raise NotationSyntaxError("Unexpected separator inside rank", position=offset + i)
            if is_suffix(ch):
                raise NotationSyntaxError(f"Suffix {ch!r} without a piece letter", position=offset + i)
            raise NotationSyntaxError(f"Unexpected character {s[i]!r} in rank", position=offset + i)
        letter = s[i]
        i += 1
        suffix = None
        if i < n and is_suffix(s[i]):
            suffix = s[i]
            i += 1
        cells.append(Piece(letter, prefix, suffix))

    return tuple(cells)
