"""The common interface that font loaders implement: loading, metadata, outlines, rasterization."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Generic, TypeVar

from glyphkit.canvas import Canvas, RasterizationOptions
from glyphkit.errors import FontIOError, UnknownFormatError
from glyphkit.file_type import FileType
from glyphkit.geometry import RectF, RectI, Transform2F, Vector2F
from glyphkit.handle import Handle, MemoryHandle, NativeHandle, PathHandle
from glyphkit.hinting import HintingOptions

logger = logging.getLogger(__name__)

F = TypeVar("F")
L = TypeVar("L", bound="Loader")


@dataclass
class FallbackFont(Generic[F]):
    """One font of a fallback query result, with the scale to apply to it."""

    font: F
    scale: float = 1.0


@dataclass
class FallbackResult(Generic[F]):
    """The fonts of a fallback query and how many characters of the text they cover."""

    fonts: list[FallbackFont[F]] = field(default_factory=list)
    valid_len: int = 0


class Loader(ABC):
    """A font loaded by some font library, able to report metadata and render glyphs."""

    @classmethod
    @abstractmethod
    def from_bytes(cls: type[L], font_data: bytes, font_index: int = 0) -> L:
        """Loads a font from raw font data; `font_index` picks a font in a collection."""

    @classmethod
    @abstractmethod
    def from_file(cls: type[L], file: BinaryIO, font_index: int = 0) -> L:
        """Loads a font from an open binary file."""

    @classmethod
    def from_path(cls: type[L], path: str | os.PathLike, font_index: int = 0) -> L:
        """Loads a font from the file at `path`."""
        try:
            with open(path, "rb") as file:
                return cls.from_file(file, font_index)
        except OSError as error:
            raise FontIOError(error) from error

    @classmethod
    @abstractmethod
    def from_native_font(cls: type[L], native_font: Any) -> L:
        """Creates a font from the native font object of this loader."""

    @classmethod
    @abstractmethod
    def native_type(cls) -> type:
        """Returns the type of the native font objects this loader uses."""

    @classmethod
    def from_handle(cls: type[L], handle: Handle) -> L:
        """Loads the font a handle points to."""
        if isinstance(handle, MemoryHandle):
            return cls.from_bytes(handle.data, handle.font_index)
        if isinstance(handle, PathHandle):
            return cls.from_path(handle.path, handle.font_index)
        if isinstance(handle, NativeHandle):
            native = handle.native_as(cls.native_type())
            if native is None:
                raise UnknownFormatError()
            return cls.from_native_font(native)
        raise UnknownFormatError()

    @classmethod
    @abstractmethod
    def analyze_bytes(cls, font_data: bytes) -> FileType:
        """Tells whether raw data is a supported font, and of which file type."""

    @classmethod
    @abstractmethod
    def analyze_file(cls, file: BinaryIO) -> FileType:
        """Tells whether an open file is a supported font, and of which file type."""

    @classmethod
    def analyze_path(cls, path: str | os.PathLike) -> FileType:
        """Tells whether the file at `path` is a supported font, and of which file type."""
        try:
            with open(path, "rb") as file:
                return cls.analyze_file(file)
        except OSError as error:
            raise FontIOError(error) from error

    @abstractmethod
    def native_font(self) -> Any:
        """Returns the wrapped native font object."""

    @abstractmethod
    def postscript_name(self) -> str | None:
        """Returns the PostScript name of the font, which should be globally unique."""

    @abstractmethod
    def full_name(self) -> str:
        """Returns the full (display) name of the font."""

    @abstractmethod
    def family_name(self) -> str:
        """Returns the name of the font family."""

    @abstractmethod
    def is_monospace(self) -> bool:
        """Returns True if the font is fixed-width."""

    @abstractmethod
    def properties(self) -> Any:
        """Returns the font's CSS-style properties (style, weight, stretch)."""

    @abstractmethod
    def glyph_count(self) -> int:
        """Returns the number of glyphs; glyph IDs run from 0 up to this value."""

    @abstractmethod
    def glyph_for_char(self, character: str) -> int | None:
        """Returns the usual glyph ID for a character, without shaping."""

    def glyph_by_name(self, name: str) -> int | None:
        """Returns the glyph ID for a glyph name; unsupported unless a loader overrides it."""
        logger.warning("unimplemented")
        return None

    @abstractmethod
    def outline(self, glyph_id: int, hinting_mode: HintingOptions, sink: Any) -> None:
        """Sends the glyph's vector path, grid-fitted as requested, to `sink`."""

    @abstractmethod
    def typographic_bounds(self, glyph_id: int) -> RectF:
        """Returns the glyph bounds in font units, with the origin at the bottom left."""

    @abstractmethod
    def advance(self, glyph_id: int) -> Vector2F:
        """Returns the distance from this glyph's origin to the next, in font units."""

    @abstractmethod
    def origin(self, glyph_id: int) -> Vector2F:
        """Returns how far the glyph is displaced from the origin."""

    @abstractmethod
    def metrics(self) -> Any:
        """Returns the metrics of the whole font; they include `units_per_em`."""

    def handle(self) -> Handle | None:
        """Returns a memory handle to this font's data, or None without data.

        The handle always uses font index 0, even for a member of a collection.
        """
        font_data = self.copy_font_data()
        if font_data is None:
            return None
        return Handle.from_memory(font_data, 0)

    @abstractmethod
    def copy_font_data(self) -> bytes | None:
        """Returns the raw font file data (the whole collection for collection members)."""

    @abstractmethod
    def supports_hinting_options(
        self, hinting_options: HintingOptions, for_rasterization: bool
    ) -> bool:
        """Tells whether the loader can hint outlines, or rasterized glyphs, as requested."""

    def raster_bounds(
        self,
        glyph_id: int,
        point_size: float,
        transform: Transform2F,
        hinting_options: HintingOptions,
        rasterization_options: RasterizationOptions,
    ) -> RectI:
        """Returns the pixels the rendered glyph covers, with the origin at the top left."""
        bounds = self.typographic_bounds(glyph_id)
        scaled = bounds.scale(point_size / float(self.metrics().units_per_em))
        flipped = RectF(
            Vector2F(scaled.origin_x, -scaled.origin_y - scaled.height),
            scaled.size,
        )
        return transform.transform_rect(flipped).round_out().to_i32()

    @abstractmethod
    def rasterize_glyph(
        self,
        canvas: Canvas,
        glyph_id: int,
        point_size: float,
        transform: Transform2F,
        hinting_options: HintingOptions,
        rasterization_options: RasterizationOptions,
    ) -> None:
        """Draws a glyph onto `canvas`, converting to the canvas format as needed."""

    @abstractmethod
    def get_fallbacks(self, text: str, locale: str) -> FallbackResult:
        """Returns fallback fonts for `text` in a locale such as "en-US"."""

    @abstractmethod
    def load_font_table(self, table_tag: int) -> bytes | None:
        """Returns the OpenType table with the given tag, if the font has it."""