from __future__ import annotations

from typing import Optional


class NotationError(ValueError):
    """Base class for every rejected FEEN input.

    ``position`` is the index inside the offending field (``None`` when the
    error is about the value as a whole) and ``field`` names that field.
    """

    def __init__(self, message: str, position: Optional[int] = None, field: Optional[str] = None) -> None:
        self.message = message
        self.position = position
        self.field = field
        super().__init__(self._render())

    def _render(self) -> str:
        out = self.message
        if self.field is not None:
            out = f"{self.field}: {out}"
        if self.position is not None:
            out = f"{out} (at position {self.position})"
        return out

    def in_field(self, field: str) -> "NotationError":
        """Tag the error with the FEEN field it came from."""
        if self.field is None:
            self.field = field
            self.args = (self._render(),)
        return self


class NotationSyntaxError(NotationError):
    pass


class ShapeError(NotationError):
    pass


class CountError(NotationError):
    pass


class CanonicalOrderError(NotationError):
    def __init__(self, message: str, expected: str, position: Optional[int] = None, field: Optional[str] = None) -> None:
        self.expected = expected
        super().__init__(message, position=position, field=field)


class StyleError(NotationError):
    pass
