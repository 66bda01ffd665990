"""Small integer and floating-point geometry types used for glyph layout."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2I:
    """A 2D vector with integer components."""

    x: int = 0
    y: int = 0

    def to_f32(self) -> Vector2F:
        """Returns this vector with floating-point components."""
        return Vector2F(float(self.x), float(self.y))

    def __add__(self, other: Vector2I) -> Vector2I:
        return Vector2I(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2I) -> Vector2I:
        return Vector2I(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2I:
        return Vector2I(-self.x, -self.y)


@dataclass(frozen=True)
class Vector2F:
    """A 2D vector with floating-point components."""

    x: float = 0.0
    y: float = 0.0

    def floor(self) -> Vector2F:
        """Rounds both components down."""
        return Vector2F(float(math.floor(self.x)), float(math.floor(self.y)))

    def _ceil(self) -> Vector2F:
        return Vector2F(float(math.ceil(self.x)), float(math.ceil(self.y)))

    def to_i32(self) -> Vector2I:
        """Converts to integer components, rounding to the nearest integer."""
        return Vector2I(int(round(self.x)), int(round(self.y)))

    def __add__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2F:
        return Vector2F(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2F:
        return Vector2F(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class RectI:
    """An integer rectangle given by its origin (top left) and size."""

    origin: Vector2I = Vector2I()
    size: Vector2I = Vector2I()

    @property
    def origin_x(self) -> int:
        return self.origin.x

    @property
    def origin_y(self) -> int:
        return self.origin.y

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    @property
    def lower_right(self) -> Vector2I:
        return self.origin + self.size

    def intersection(self, other: RectI) -> RectI | None:
        """Returns the overlapping area, or None if the rectangles do not overlap."""
        mine, theirs = self.lower_right, other.lower_right
        overlaps = (
            self.origin_x < theirs.x
            and self.origin_y < theirs.y
            and other.origin_x < mine.x
            and other.origin_y < mine.y
        )
        if not overlaps:
            return None
        upper_left = Vector2I(max(self.origin_x, other.origin_x), max(self.origin_y, other.origin_y))
        lower_right = Vector2I(min(mine.x, theirs.x), min(mine.y, theirs.y))
        return RectI(upper_left, lower_right - upper_left)

    def to_f32(self) -> RectF:
        """Returns this rectangle with floating-point coordinates."""
        return RectF(self.origin.to_f32(), self.size.to_f32())


@dataclass(frozen=True)
class RectF:
    """A floating-point rectangle given by its origin and size."""

    origin: Vector2F = Vector2F()
    size: Vector2F = Vector2F()

    @property
    def origin_x(self) -> float:
        return self.origin.x

    @property
    def origin_y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.x

    @property
    def height(self) -> float:
        return self.size.y

    @property
    def lower_right(self) -> Vector2F:
        return self.origin + self.size

    def scale(self, factor: float) -> RectF:
        """Multiplies origin and size by a scalar."""
        return RectF(self.origin * factor, self.size * factor)

    def round_out(self) -> RectF:
        """Returns the smallest rectangle with integral corners that contains this one."""
        upper_left = self.origin.floor()
        lower_right = self.lower_right._ceil()
        return RectF(upper_left, lower_right - upper_left)

    def to_i32(self) -> RectI:
        """Converts to an integer rectangle."""
        return RectI(self.origin.to_i32(), self.size.to_i32())

    def __mul__(self, factor: float) -> RectF:
        return self.scale(factor)


@dataclass(frozen=True)
class Transform2F:
    """A 2D affine transform.

    A point (x, y) maps to (m11*x + m12*y + m31, m21*x + m22*y + m32).
    """

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m31: float = 0.0
    m32: float = 0.0

    @classmethod
    def identity(cls) -> Transform2F:
        """Returns the identity transform."""
        return cls()

    @classmethod
    def row_major(cls, m11, m12, m21, m22, m31, m32) -> Transform2F:
        """Builds a transform from its matrix entries in row-major order."""
        return cls(float(m11), float(m12), float(m21), float(m22), float(m31), float(m32))

    @classmethod
    def from_translation(cls, vector: Vector2F) -> Transform2F:
        """Returns a pure translation."""
        return cls(m31=float(vector.x), m32=float(vector.y))

    @classmethod
    def from_scale(cls, factor) -> Transform2F:
        """Returns a scale; `factor` is a number or a per-axis Vector2F."""
        if isinstance(factor, Vector2F):
            return cls(m11=float(factor.x), m22=float(factor.y))
        return cls(m11=float(factor), m22=float(factor))

    def apply(self, point: Vector2F) -> Vector2F:
        """Transforms a point."""
        return Vector2F(
            self.m11 * point.x + self.m12 * point.y + self.m31,
            self.m21 * point.x + self.m22 * point.y + self.m32,
        )

    def transform_rect(self, rect: RectF) -> RectF:
        """Returns the bounding box of the transformed rectangle."""
        lower_right = rect.lower_right
        corners = [
            self.apply(rect.origin),
            self.apply(Vector2F(lower_right.x, rect.origin_y)),
            self.apply(Vector2F(rect.origin_x, lower_right.y)),
            self.apply(lower_right),
        ]
        xs = [corner.x for corner in corners]
        ys = [corner.y for corner in corners]
        upper_left = Vector2F(min(xs), min(ys))
        return RectF(upper_left, Vector2F(max(xs), max(ys)) - upper_left)

    def __matmul__(self, other):
        if isinstance(other, Transform2F):
            return Transform2F(
                self.m11 * other.m11 + self.m12 * other.m21,
                self.m11 * other.m12 + self.m12 * other.m22,
                self.m21 * other.m11 + self.m22 * other.m21,
                self.m21 * other.m12 + self.m22 * other.m22,
                self.m11 * other.m31 + self.m12 * other.m32 + self.m31,
                self.m21 * other.m31 + self.m22 * other.m32 + self.m32,
            )
        if isinstance(other, Vector2F):
            return self.apply(other)
        if isinstance(other, RectF):
            return self.transform_rect(other)
        return NotImplemented