from __future__ import annotations

from enum import Enum

class Side(Enum):
    FIRST = 1
    SECOND = -1

    def opponent(self) -> "Side":
        return Side.SECOND if self is Side.FIRST else Side.FIRST

SEPARATOR = "/"
FIELD_SEPARATOR = " "
PREFIXES = "+-"
SUFFIXES = "'"
MAX_HAND_COUNT = 999
MAX_EMPTY_RUN = 9999

def is_letter(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")

def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"

def is_prefix(ch: str) -> bool:
    return len(ch) == 1 and ch in PREFIXES

def is_suffix(ch: str) -> bool:
    return len(ch) == 1 and ch in SUFFIXES

def side_of(letter: str) -> Side:
    return Side.FIRST if letter.isupper() else Side.SECOND
