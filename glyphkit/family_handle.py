"""The information needed to locate and open the fonts in a family."""

from __future__ import annotations

from typing import Iterable, Iterator

from glyphkit.handle import Handle


class FamilyHandle:
    """An ordered set of font handles belonging to one family."""

    def __init__(self, fonts: Iterable[Handle] = ()) -> None:
        self._fonts: list[Handle] = list(fonts)

    @classmethod
    def from_font_handles(cls, fonts: Iterable[Handle]) -> FamilyHandle:
        """Creates a family handle from font handles, keeping their order."""
        return cls(fonts)

    def push(self, font: Handle) -> None:
        """Adds a handle to the end of the set."""
        self._fonts.append(font)

    def is_empty(self) -> bool:
        """Returns True if the set holds no fonts."""
        return not self._fonts

    def fonts(self) -> tuple[Handle, ...]:
        """Returns all the handles in the set."""
        return tuple(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[Handle]:
        return iter(self._fonts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FamilyHandle):
            return NotImplemented
        return self._fonts == other._fonts

    def __repr__(self) -> str:
        return f"FamilyHandle({self._fonts!r})"