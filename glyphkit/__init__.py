"""Font handles, a font loader interface, glyph canvases, hinting options and family names."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "errors",
    "family",
    "family_handle",
    "family_name",
    "file_type",
    "geometry",
    "handle",
    "hinting",
    "loader",
]