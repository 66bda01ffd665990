"""The type of a font file: a single font or a TrueType/OpenType collection."""

from __future__ import annotations

from dataclasses import dataclass

_U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True)
class FileType:
    """A single font, or a collection holding `collection_size` fonts."""

    collection_size: int | None = None

    def __post_init__(self) -> None:
        if self.collection_size is not None and not 0 <= self.collection_size <= _U32_MAX:
            raise ValueError(f"invalid collection size: {self.collection_size}")

    @classmethod
    def single(cls) -> FileType:
        """A file holding one font (.ttf, .otf, .woff, ...)."""
        return cls()

    @classmethod
    def collection(cls, count: int) -> FileType:
        """A file holding `count` fonts (.ttc, .otc, ...)."""
        return cls(count)

    def is_collection(self) -> bool:
        """Returns True for a font collection."""
        return self.collection_size is not None

    @property
    def font_count(self) -> int:
        """The number of fonts in the file."""
        return 1 if self.collection_size is None else self.collection_size