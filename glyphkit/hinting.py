"""How hinting (grid fitting) is performed for a glyph's outline and rasterization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HintingMode(Enum):
    """The kind of grid fitting to perform."""

    NONE = "none"
    """No hinting unless absolutely necessary to assemble the glyph."""
    VERTICAL = "vertical"
    """Hinting in the vertical direction only."""
    VERTICAL_SUBPIXEL = "vertical_subpixel"
    """Vertical hinting, tuned for subpixel antialiasing."""
    FULL = "full"
    """Hinting in both horizontal and vertical directions."""


@dataclass(frozen=True)
class HintingOptions:
    """A hinting mode together with the point size used for grid fitting."""

    mode: HintingMode = HintingMode.NONE
    size: float | None = None

    def __post_init__(self) -> None:
        if self.mode is HintingMode.NONE:
            if self.size is not None:
                raise ValueError("no point size applies when hinting is off")
        elif self.size is None:
            raise ValueError(f"{self.mode.name} hinting needs a point size")

    @classmethod
    def none(cls) -> HintingOptions:
        """No hinting."""
        return cls()

    @classmethod
    def vertical(cls, size: float) -> HintingOptions:
        """Vertical hinting at the given point size."""
        return cls(HintingMode.VERTICAL, float(size))

    @classmethod
    def vertical_subpixel(cls, size: float) -> HintingOptions:
        """Vertical, subpixel-tuned hinting at the given point size."""
        return cls(HintingMode.VERTICAL_SUBPIXEL, float(size))

    @classmethod
    def full(cls, size: float) -> HintingOptions:
        """Full hinting at the given point size."""
        return cls(HintingMode.FULL, float(size))

    def grid_fitting_size(self) -> float | None:
        """Returns the point size used for grid fitting, or None without hinting."""
        return self.size