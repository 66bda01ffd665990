"""Errors raised when loading fonts, loading glyphs and selecting fonts."""

from __future__ import annotations


class FontLoadingError(Exception):
    """A loader failed to load a font."""

    default_message = "failed to load font"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class UnknownFormatError(FontLoadingError):
    """The data was of a format the loader didn't recognize."""

    default_message = "unknown format"


class NoSuchFontInCollectionError(FontLoadingError):
    """An index past the end of a font collection was requested."""

    default_message = "no such font in the collection"


class FontParseError(FontLoadingError):
    """The font was malformed or corrupted."""

    default_message = "parse error"


class NoFilesystemError(FontLoadingError):
    """A font was to be read from disk, but there is no filesystem."""

    default_message = "no filesystem present"


class FontIOError(FontLoadingError):
    """An I/O error occurred while loading a font."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"I/O error: {error}")


class GlyphLoadingError(Exception):
    """A font failed to load a glyph."""

    default_message = "failed to load glyph"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class NoSuchGlyphError(GlyphLoadingError):
    """The font has no glyph with the requested ID."""

    default_message = "no such glyph"


class PlatformError(GlyphLoadingError):
    """A platform function reported an error."""

    default_message = "platform error"


class SelectionError(Exception):
    """A source failed to look up a font or fonts."""

    default_message = "font selection failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class NotFoundError(SelectionError):
    """No font matched the query."""

    default_message = "no font found"


class CannotAccessSourceError(SelectionError):
    """The source could not be accessed; `reason` may name the file involved."""

    default_message = "failed to access source"

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CannotAccessSourceError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash((CannotAccessSourceError, self.reason))