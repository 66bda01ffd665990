"""Values of the CSS `font-family` property: named families and generic families."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GenericFamily(Enum):
    """A generic font family keyword, as defined by CSS Fonts Level 3."""

    SERIF = "serif"
    """The formal text style for a script."""
    SANS_SERIF = "sans-serif"
    """Low-contrast glyphs with plain stroke endings."""
    MONOSPACE = "monospace"
    """All glyphs have the same fixed width."""
    CURSIVE = "cursive"
    """An informal, handwritten-looking script style."""
    FANTASY = "fantasy"
    """Primarily decorative or expressive fonts."""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Title:
    """A specific font family given by name, such as "Arial" or "times"."""

    name: str

    def __str__(self) -> str:
        return self.name


FamilyName = Title | GenericFamily


def parse_family_name(text: str) -> FamilyName:
    """Parses one `font-family` entry; single quotes are dropped and whitespace trimmed.

    The generic keywords are matched exactly; anything else is a family title.
    """
    name = text.replace("'", "").strip()
    try:
        return GenericFamily(name)
    except ValueError:
        return Title(name)


def parse_family_names(text: str) -> list[FamilyName]:
    """Parses a comma-separated `font-family` list, keeping its order."""
    return [parse_family_name(part) for part in text.split(",")]