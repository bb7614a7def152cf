from __future__ import annotations

import re
from typing import List, Tuple

from .core.types import SEPARATOR

_RUN = re.compile(re.escape(SEPARATOR) + "+")


def separator_runs(s: str) -> Tuple[int, ...]:
    """Distinct lengths of maximal separator runs in ``s``, ascending.

    The longest run is one less than the number of dimensions ``s`` spans.
    """
    return tuple(sorted({m.end() - m.start() for m in _RUN.finditer(s)}))


def split_on_run(s: str, length: int, offset: int = 0) -> List[Tuple[str, int]]:
    """Split ``s`` wherever exactly ``length`` separators occur.

    Shorter runs stay inside their part. Returns ``(part, part_offset)``
    pairs, offsets being absolute when ``offset`` is where ``s`` starts.
    """
    parts: List[Tuple[str, int]] = []
    start = 0
    for m in _RUN.finditer(s):
        if m.end() - m.start() != length:
            continue
        parts.append((s[start:m.start()], offset + start))
        start = m.end()
    parts.append((s[start:], offset + start))
    return parts
