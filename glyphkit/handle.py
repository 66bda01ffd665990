"""Handles: the information needed to locate and open a font."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")

_U32_MAX = 0xFFFF_FFFF


def _check_font_index(font_index: int) -> None:
    if not isinstance(font_index, int) or not 0 <= font_index <= _U32_MAX:
        raise ValueError(f"invalid font index: {font_index!r}")


class Handle:
    """Locates a font: a path on disk, raw data in memory, or an already loaded font.

    Open the font a handle refers to with a loader.
    """

    @classmethod
    def from_path(cls, path: str | os.PathLike, font_index: int = 0) -> PathHandle:
        """A handle to a font file; `font_index` picks a font in a collection (0 otherwise)."""
        return PathHandle(Path(path), font_index)

    @classmethod
    def from_memory(cls, data: bytes, font_index: int = 0) -> MemoryHandle:
        """A handle to raw font data; `font_index` picks a font in a collection (0 otherwise)."""
        return MemoryHandle(bytes(data), font_index)

    @classmethod
    def from_native(cls, font: Any) -> NativeHandle:
        """A handle wrapping the native font object of an already loaded font."""
        return NativeHandle(font.native_font())

    def native_as(self, kind: type[T]) -> T | None:
        """Returns the wrapped native font if this handle holds one of type `kind`."""
        return None

    def load(self, loader: Any) -> Any:
        """Opens the font with the given loader class."""
        return loader.from_handle(self)


@dataclass(frozen=True)
class PathHandle(Handle):
    """A font on disk referenced by a path."""

    path: Path
    font_index: int = 0

    def __post_init__(self) -> None:
        _check_font_index(self.font_index)
        object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class MemoryHandle(Handle):
    """A font held in memory as raw TrueType/OpenType/etc. data."""

    data: bytes = field(repr=False)
    font_index: int = 0

    def __post_init__(self) -> None:
        _check_font_index(self.font_index)
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class NativeHandle(Handle):
    """An already loaded font, held as its native font object."""

    inner: Any

    def native_as(self, kind: type[T]) -> T | None:
        return self.inner if isinstance(self.inner, kind) else None