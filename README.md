# glyphkit

glyphkit provides the building blocks for working with fonts in Python:

- **Handles** (`glyphkit.handle`) that say where a font lives: a path on
  disk, bytes in memory, or an already loaded native font object.
- A **loader interface** (`glyphkit.loader.Loader`), an abstract base class
  that concrete font backends implement. It covers loading, name and property
  queries, glyph lookup, outlines, metrics, raster bounds, rasterization,
  fallback queries and font tables.
- **Canvases** (`glyphkit.canvas`): in-memory bitmaps in `A8`, `RGB24` or
  `RGBA32` format. Blits between formats convert the pixels.
- **Hinting options**, **file types**, **CSS-style family names**, small
  **geometry** types, and a hierarchy of exceptions for loading and
  selection failures.

It needs nothing beyond the standard library.

## Geometry

`glyphkit.geometry` holds the vector (`Vector2I`, `Vector2F`), rectangle
(`RectI`, `RectF`) and affine-transform (`Transform2F`) types that the rest of
the package uses.

```python
from glyphkit.geometry import RectF, Transform2F, Vector2F

t = Transform2F.from_translation(Vector2F(8.0, 8.0))
bounds = t.transform_rect(RectF(Vector2F(0.0, 0.0), Vector2F(10.0, 20.0)))
pixels = bounds.round_out().to_i32()      # RectI(origin=Vector2I(8, 8), size=Vector2I(10, 20))

scaled = Transform2F.from_scale(2.0) @ t  # transforms compose with @
point = scaled @ Vector2F(1.0, 1.0)       # Vector2F(18.0, 18.0)
```

`RectI.intersection` returns the overlap of two rectangles, or `None` when
they do not overlap.

## Canvases

```python
from glyphkit.canvas import Canvas, Format
from glyphkit.geometry import Vector2I

canvas = Canvas.with_stride(Vector2I(8, 2), 8, Format.A8)

# Expand a 1-bit-per-pixel bitmap (one byte per row) into the 8-bit canvas.
canvas.blit_from_bitmap_1bpp(Vector2I(0, 0), bytes([0b10100000, 0xFF]), Vector2I(8, 2), 1)
print(list(canvas.row(0)))             # [255, 0, 255, 0, 0, 0, 0, 0]
print(Format.RGB24.bytes_per_pixel())  # 3
```

`Canvas(size, format)` computes the stride from the width; `pixels` is a
`bytearray` that starts zeroed. `blit_from` copies raw pixel rows onto the
canvas and `blit_from_canvas` copies another canvas to the origin. Copies
between `A8` and `RGB24`, and between `RGB24` and `RGBA32`, convert the
pixels. A copy between `A8` and `RGBA32` raises `ValueError`, as does a source
whose length does not match its size and stride. A 1-bit bitmap can only be
expanded onto an `A8` canvas.

A blit that falls partly outside the canvas writes only the visible region.
A blit that falls entirely outside writes nothing.

`RasterizationOptions` names the antialiasing strategy a loader is asked for:
`BILEVEL`, `GRAYSCALE_AA` or `SUBPIXEL_AA`.

## Hinting and file types

```python
from glyphkit.file_type import FileType
from glyphkit.hinting import HintingOptions

HintingOptions.full(16.0).grid_fitting_size()   # 16.0
HintingOptions.none().grid_fitting_size()       # None

FileType.collection(2).is_collection()          # True
FileType.single().font_count                    # 1
```

## Family names

`glyphkit.family_name` parses the CSS `font-family` value syntax into `Title`
(a specific family) and `GenericFamily` (`SERIF`, `SANS_SERIF`, `MONOSPACE`,
`CURSIVE`, `FANTASY`). Single quotes are dropped and whitespace is trimmed:

```python
from glyphkit.family_name import parse_family_names

parse_family_names("'Times New Roman', Arial, serif")
# [Title(name='Times New Roman'), Title(name='Arial'), GenericFamily.SERIF]
```

## Handles, families and loaders

A `Handle` locates a font. A `Loader` subclass turns a handle into a usable
font object.

```python
from glyphkit.family import Family
from glyphkit.family_handle import FamilyHandle
from glyphkit.handle import Handle

handle = Handle.from_path("fonts/Example-Regular.otf", 0)
font = handle.load(MyLoader)               # MyLoader subclasses glyphkit.loader.Loader

family_handle = FamilyHandle.from_font_handles([handle])
family = Family.from_handle(MyLoader, family_handle)
```

`Handle.from_path`, `Handle.from_memory` and `Handle.from_native` return a
`PathHandle`, `MemoryHandle` or `NativeHandle`. `native_as(kind)` returns the
native font object of a `NativeHandle` if it is of type `kind`, and `None`
otherwise.

A loader implements the abstract methods of `Loader`: `from_bytes`,
`from_file`, `from_native_font`, `native_type`, `analyze_bytes`,
`analyze_file`, `postscript_name`, `glyph_for_char`, `typographic_bounds`,
`metrics`, `rasterize_glyph` and the rest. It then gets these for free:

- `from_path` and `analyze_path`, which open the file and turn an `OSError`
  into `FontIOError`;
- `from_handle`, which dispatches on the kind of handle and raises
  `UnknownFormatError` for a native object of the wrong type;
- `handle`, which wraps the font data in a memory handle with index 0;
- `raster_bounds`, which computes pixel bounds from the typographic bounds,
  the point size, `metrics().units_per_em` and a transform;
- `glyph_by_name`, which logs a warning and returns `None` unless overridden.

`FallbackResult` and `FallbackFont` carry the result of `get_fallbacks`.

## Errors

Failures are raised as exceptions from `glyphkit.errors`:

- `FontLoadingError`, with the subclasses `UnknownFormatError`,
  `NoSuchFontInCollectionError`, `FontParseError`, `NoFilesystemError` and
  `FontIOError` (which keeps the underlying error as `error`);
- `GlyphLoadingError`, with the subclasses `NoSuchGlyphError` and
  `PlatformError`;
- `SelectionError`, with the subclasses `NotFoundError` and
  `CannotAccessSourceError` (which keeps an optional `reason`).

Catch the base class to handle every case in a family of errors.

## What glyphkit does not do

glyphkit defines the loader interface but ships no concrete loader: it does
not parse font files, read glyph outlines or rasterize glyphs itself. It also
has no way to look up fonts installed on the system, and no command-line
tools. Those come from a `Loader` subclass, or from code you write on top of
these types.