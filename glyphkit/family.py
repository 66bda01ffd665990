"""A set of loaded faces that vary in weight, width or slope."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from glyphkit.family_handle import FamilyHandle
from glyphkit.handle import Handle

F = TypeVar("F")


class Family(Generic[F]):
    """A font family whose faces have been opened by a loader."""

    def __init__(self, fonts: Iterable[F] = ()) -> None:
        self._fonts: list[F] = list(fonts)

    @classmethod
    def from_font_handles(cls, loader: Any, font_handles: Iterable[Handle]) -> Family:
        """Opens every handle with `loader`; the first failure is raised."""
        return cls(loader.from_handle(handle) for handle in font_handles)

    @classmethod
    def from_handle(cls, loader: Any, family_handle: FamilyHandle) -> Family:
        """Opens every font of a family handle with `loader`."""
        return cls.from_font_handles(loader, family_handle.fonts())

    def fonts(self) -> tuple[F, ...]:
        """Returns the individual fonts of the family."""
        return tuple(self._fonts)

    def is_empty(self) -> bool:
        """Returns True if the family has no fonts."""
        return not self._fonts

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[F]:
        return iter(self._fonts)

    def __repr__(self) -> str:
        return f"Family({self._fonts!r})"