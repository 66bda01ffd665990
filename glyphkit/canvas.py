"""An in-memory bitmap surface for glyph rasterization."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from glyphkit.geometry import RectI, Vector2I

_BITMAP_1BPP_TO_8BPP = tuple(
    bytes(0xFF if byte & (0x80 >> bit) else 0 for bit in range(8)) for byte in range(256)
)


class Format(Enum):
    """The image format of a canvas."""

    RGBA32 = "rgba32"
    """Premultiplied R8G8B8A8, little-endian."""
    RGB24 = "rgb24"
    """R8G8B8, little-endian."""
    A8 = "a8"
    """A8."""

    def bits_per_pixel(self) -> int:
        """Returns the number of bits per pixel."""
        return {Format.RGBA32: 32, Format.RGB24: 24, Format.A8: 8}[self]

    def components_per_pixel(self) -> int:
        """Returns the number of color channels per pixel."""
        return {Format.RGBA32: 4, Format.RGB24: 3, Format.A8: 1}[self]

    def bits_per_component(self) -> int:
        """Returns the number of bits per color channel."""
        return self.bits_per_pixel() // self.components_per_pixel()

    def bytes_per_pixel(self) -> int:
        """Returns the number of bytes per pixel."""
        return self.bits_per_pixel() // 8


class RasterizationOptions(Enum):
    """The antialiasing strategy used when rasterizing glyphs."""

    BILEVEL = "bilevel"
    """Each pixel is either entirely on or off."""
    GRAYSCALE_AA = "grayscale_aa"
    """Grayscale antialiasing; only one channel is used."""
    SUBPIXEL_AA = "subpixel_aa"
    """Subpixel RGB antialiasing, for LCD screens."""


def _copy(src: bytes) -> bytes:
    return src


def _rgb24_to_a8(src: bytes) -> bytes:
    return src[1::3]


def _a8_to_rgb24(src: bytes) -> bytearray:
    out = bytearray(len(src) * 3)
    for channel in range(3):
        out[channel::3] = src
    return out


def _rgba32_to_rgb24(src: bytes) -> bytearray:
    out = bytearray(len(src) // 4 * 3)
    for channel in range(3):
        out[channel::3] = src[channel::4]
    return out


def _rgb24_to_rgba32(src: bytes) -> bytearray:
    out = bytearray(b"\xff") * (len(src) // 3 * 4)
    for channel in range(3):
        out[channel::4] = src[channel::3]
    return out


_BLITTERS: dict[tuple[Format, Format], Callable[[bytes], bytes]] = {
    (Format.A8, Format.A8): _copy,
    (Format.RGB24, Format.RGB24): _copy,
    (Format.RGBA32, Format.RGBA32): _copy,
    (Format.A8, Format.RGB24): _rgb24_to_a8,
    (Format.RGB24, Format.A8): _a8_to_rgb24,
    (Format.RGB24, Format.RGBA32): _rgba32_to_rgb24,
    (Format.RGBA32, Format.RGB24): _rgb24_to_rgba32,
}


class Canvas:
    """A bitmap of `size` pixels stored row by row in `pixels`, `stride` bytes per row."""

    def __init__(self, size: Vector2I, format: Format, stride: int | None = None) -> None:
        if size.x < 0 or size.y < 0:
            raise ValueError("canvas size must not be negative")
        if stride is None:
            stride = size.x * format.bytes_per_pixel()
        if stride < 0:
            raise ValueError("canvas stride must not be negative")
        self.size = size
        self.stride = stride
        self.format = format
        self.pixels = bytearray(stride * size.y)

    @classmethod
    def with_stride(cls, size: Vector2I, stride: int, format: Format) -> Canvas:
        """Creates a blank canvas with an explicit number of bytes between rows."""
        return cls(size, format, stride)

    def __repr__(self) -> str:
        return (
            f"Canvas(pixels={len(self.pixels)}, size={self.size!r}, "
            f"stride={self.stride}, format={self.format!r})"
        )

    def row(self, y: int) -> bytes:
        """Returns the bytes of row `y`."""
        if not 0 <= y < self.size.y:
            raise IndexError(f"row {y} out of range")
        return bytes(self.pixels[y * self.stride : (y + 1) * self.stride])

    def blit_from_canvas(self, src: Canvas) -> None:
        """Copies another canvas onto this one at the origin."""
        self.blit_from(Vector2I(0, 0), src.pixels, src.size, src.stride, src.format)

    def blit_from(
        self,
        dst_point: Vector2I,
        src_bytes: bytes,
        src_size: Vector2I,
        src_stride: int,
        src_format: Format,
    ) -> None:
        """Copies pixels into the rectangle at `dst_point` of size `src_size`.

        Only the part inside the canvas is drawn. Pixel formats are converted as needed.
        """
        src_bytes = bytes(src_bytes)
        if src_stride * src_size.y != len(src_bytes):
            raise ValueError("Number of pixels in src_bytes does not match stride and size.")
        if src_stride < src_size.x * src_format.bytes_per_pixel():
            raise ValueError("src_stride must be >= than src_size.x()")

        rect = self._clip(dst_point, src_size)
        if rect is None:
            return

        convert = _BLITTERS.get((self.format, src_format))
        if convert is None:
            raise ValueError(f"cannot blit {src_format.name} pixels onto a {self.format.name} canvas")

        src_bpp = src_format.bytes_per_pixel()
        dst_bpp = self.format.bytes_per_pixel()
        with memoryview(self.pixels) as view:
            for y in range(rect.height):
                dst_start = (y + rect.origin_y) * self.stride + rect.origin_x * dst_bpp
                src_start = y * src_stride
                src_row = src_bytes[src_start : src_start + rect.width * src_bpp]
                view[dst_start : dst_start + rect.width * dst_bpp] = convert(src_row)

    def blit_from_bitmap_1bpp(
        self,
        dst_point: Vector2I,
        src_bytes: bytes,
        src_size: Vector2I,
        src_stride: int,
    ) -> None:
        """Expands a 1-bit-per-pixel bitmap (MSB first) onto an A8 canvas."""
        if self.format is not Format.A8:
            raise ValueError("1bpp bitmaps can only be blitted onto an A8 canvas")

        rect = self._clip(dst_point, src_size)
        if rect is None:
            return

        src_bytes = bytes(src_bytes)
        row_len = rect.width * self.format.bytes_per_pixel()
        src_row_len = -(-rect.width // 8)
        with memoryview(self.pixels) as view:
            for y in range(rect.height):
                dst_start = (y + rect.origin_y) * self.stride + rect.origin_x
                src_start = y * src_stride
                src_row = src_bytes[src_start : src_start + src_row_len]
                if len(src_row) < src_row_len:
                    raise IndexError("source bitmap is shorter than its size and stride imply")
                expanded = b"".join(_BITMAP_1BPP_TO_8BPP[byte] for byte in src_row)
                view[dst_start : dst_start + row_len] = expanded[:row_len]

    def _clip(self, dst_point: Vector2I, src_size: Vector2I) -> RectI | None:
        return RectI(dst_point, src_size).intersection(RectI(Vector2I(0, 0), self.size))