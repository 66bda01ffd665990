import logging
from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from glyphkit.canvas import Format, RasterizationOptions
from glyphkit.errors import (
    FontIOError,
    NoSuchFontInCollectionError,
    NoSuchGlyphError,
    UnknownFormatError,
)
from glyphkit.file_type import FileType
from glyphkit.geometry import RectF, RectI, Transform2F, Vector2F, Vector2I
from glyphkit.handle import Handle, MemoryHandle
from glyphkit.hinting import HintingOptions
from glyphkit.loader import FallbackFont, FallbackResult, Loader


@dataclass(frozen=True)
class DummyNative:
    data: bytes
    font_index: int


class DummyFont(Loader):
    """A toy loader: b"dumy" is a single font, b"dcol" + count byte a collection."""

    def __init__(self, data, font_index):
        self.data = data
        self.font_index = font_index
        self.glyph_bounds = {}
        self.units_per_em = 1000

    @classmethod
    def from_bytes(cls, font_data, font_index=0):
        file_type = cls.analyze_bytes(font_data)
        if font_index >= file_type.font_count:
            raise NoSuchFontInCollectionError()
        return cls(bytes(font_data), font_index)

    @classmethod
    def from_file(cls, file, font_index=0):
        return cls.from_bytes(file.read(), font_index)

    @classmethod
    def from_native_font(cls, native_font):
        return cls(native_font.data, native_font.font_index)

    @classmethod
    def native_type(cls):
        return DummyNative

    @classmethod
    def analyze_bytes(cls, font_data):
        if font_data[:4] == b"dumy":
            return FileType.single()
        if font_data[:4] == b"dcol" and len(font_data) > 4:
            return FileType.collection(font_data[4])
        raise UnknownFormatError()

    @classmethod
    def analyze_file(cls, file):
        return cls.analyze_bytes(file.read())

    def native_font(self):
        return DummyNative(self.data, self.font_index)

    def postscript_name(self):
        return f"Dummy-{self.font_index}"

    def full_name(self):
        return "Dummy"

    def family_name(self):
        return "Dummy"

    def is_monospace(self):
        return False

    def properties(self):
        return None

    def glyph_count(self):
        return len(self.glyph_bounds)

    def glyph_for_char(self, character):
        return ord(character)

    def outline(self, glyph_id, hinting_mode, sink):
        return None

    def typographic_bounds(self, glyph_id):
        try:
            return self.glyph_bounds[glyph_id]
        except KeyError:
            raise NoSuchGlyphError() from None

    def advance(self, glyph_id):
        return Vector2F(0.0, 0.0)

    def origin(self, glyph_id):
        return Vector2F(0.0, 0.0)

    def metrics(self):
        return SimpleNamespace(units_per_em=self.units_per_em)

    def copy_font_data(self):
        return self.data

    def supports_hinting_options(self, hinting_options, for_rasterization):
        return False

    def rasterize_glyph(self, canvas, glyph_id, point_size, transform, hinting_options,
                        rasterization_options):
        return None

    def get_fallbacks(self, text, locale):
        return FallbackResult([FallbackFont(self, 1.0)], len(text))

    def load_font_table(self, table_tag):
        return None


class DatalessFont(DummyFont):
    def copy_font_data(self):
        return None


COLLECTION = b"dcol\x03rest"


def _raster(font, glyph_id=1, size=1000.0, transform=None):
    return font.raster_bounds(
        glyph_id,
        size,
        transform or Transform2F.identity(),
        HintingOptions.none(),
        RasterizationOptions.GRAYSCALE_AA,
    )


def test_loader_is_abstract():
    with pytest.raises(TypeError):
        Loader()


def test_from_path_reads_the_file(tmp_path):
    path = tmp_path / "font.bin"
    path.write_bytes(COLLECTION)
    font = Handle.from_path(path, 2).load(DummyFont)
    assert font.data == COLLECTION
    assert font.postscript_name() == "Dummy-2"
    direct = DummyFont.from_path(path, 2)
    assert (direct.data, direct.font_index) == (COLLECTION, 2)


def test_from_path_missing_file_raises_io_error(tmp_path):
    with pytest.raises(FontIOError) as info:
        Handle.from_path(tmp_path / "missing.ttf", 0).load(DummyFont)
    assert isinstance(info.value.error, FileNotFoundError)
    assert str(info.value).startswith("I/O error: ")


def test_from_path_propagates_loader_errors(tmp_path):
    path = tmp_path / "font.bin"
    path.write_bytes(COLLECTION)
    with pytest.raises(NoSuchFontInCollectionError) as info:
        Handle.from_path(path, 3).load(DummyFont)
    assert str(info.value) == "no such font in the collection"


def test_analyze_path(tmp_path):
    path = tmp_path / "font.bin"
    path.write_bytes(COLLECTION)
    assert DummyFont.analyze_path(path) == FileType.collection(3)


def test_analyze_path_missing_file(tmp_path):
    with pytest.raises(FontIOError) as info:
        DummyFont.analyze_path(tmp_path / "nothing")
    assert isinstance(info.value.error, FileNotFoundError)
    assert str(info.value) == str(FontIOError(info.value.error))


def test_from_handle_memory_keeps_index():
    font = DummyFont.from_handle(Handle.from_memory(COLLECTION, 1))
    assert (font.data, font.font_index) == (COLLECTION, 1)


def test_from_handle_path(tmp_path):
    path = tmp_path / "single.bin"
    path.write_bytes(b"dumy")
    font = Handle.from_path(path, 0).load(DummyFont)
    assert font.data == b"dumy"


def test_from_handle_native_round_trip():
    original = DummyFont.from_bytes(COLLECTION, 2)
    loaded = DummyFont.from_handle(Handle.from_native(original))
    assert (loaded.data, loaded.font_index) == (COLLECTION, 2)


def test_from_handle_native_of_other_type_is_unknown_format():
    class Other:
        def native_font(self):
            return "not a dummy native"

    with pytest.raises(UnknownFormatError):
        DummyFont.from_handle(Handle.from_native(Other()))


def test_handle_uses_index_zero():
    font = DummyFont.from_bytes(COLLECTION, 2)
    handle = font.handle()
    assert handle == MemoryHandle(COLLECTION, 0)


def test_handle_without_data_is_none():
    assert Loader.handle(DatalessFont(b"dumy", 0)) is None
    assert Loader.handle(DummyFont(b"dumy", 0)) == Handle.from_memory(b"dumy", 0)


def test_glyph_by_name_is_unimplemented(caplog):
    font = DummyFont(b"dumy", 0)
    with caplog.at_level(logging.WARNING, logger="glyphkit.loader"):
        assert Loader.glyph_by_name(font, "a") is None
    assert "unimplemented" in caplog.text


def test_raster_bounds_flips_to_top_left_origin():
    font = DummyFont(b"dumy", 0)
    font.glyph_bounds[1] = RectF(Vector2F(10.0, -20.0), Vector2F(30.0, 50.0))
    assert _raster(font) == RectI(Vector2I(10, -30), Vector2I(30, 50))


def test_raster_bounds_follows_translation():
    font = DummyFont(b"dumy", 0)
    font.glyph_bounds[1] = RectF(Vector2F(12.0, -4.0), Vector2F(40.0, 60.0))
    plain = _raster(font, size=16.0)
    moved = _raster(font, size=16.0, transform=Transform2F.from_translation(Vector2F(5.0, 7.0)))
    assert moved.size == plain.size
    assert moved.origin == plain.origin + Vector2I(5, 7)


def test_raster_bounds_scales_with_point_size():
    font = DummyFont(b"dumy", 0)
    font.glyph_bounds[1] = RectF(Vector2F(100.0, 0.0), Vector2F(200.0, 300.0))
    small = _raster(font, size=1000.0)
    large = _raster(font, size=2000.0)
    assert large.width == small.width * 2
    assert large.height == small.height * 2


def test_raster_bounds_contains_unaligned_bounds():
    font = DummyFont(b"dumy", 0)
    font.glyph_bounds[1] = RectF(Vector2F(0.5, 0.25), Vector2F(3.2, 4.6))
    rect = _raster(font)
    assert rect.origin_x <= 0.5
    assert rect.origin_x + rect.width >= 0.5 + 3.2
    assert rect.origin_y <= -(0.25 + 4.6)
    assert rect.origin_y + rect.height >= -0.25


def test_raster_bounds_missing_glyph():
    font = DummyFont(b"dumy", 0)
    with pytest.raises(NoSuchGlyphError):
        _raster(font, glyph_id=99)


def test_fallback_result_holds_fonts():
    font = DummyFont(b"dumy", 0)
    result = font.get_fallbacks("abc", "en-US")
    assert result.valid_len == 3
    assert [entry.font for entry in result.fonts] == [font]
    assert FallbackResult().fonts == []
    assert Format.A8.bytes_per_pixel() == 1