"""Layout rectangles, axis extents and normalization."""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union
import numpy as np
import pygame

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
RectLike = Union["LayoutRect", pygame.Rect, Tuple[float, float, float, float]]


@dataclass(frozen=True)
class LayoutRect:
    """Float rectangle in screen space (y grows downwards)."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_rect(cls, rect: RectLike) -> "LayoutRect":
        """Build from a LayoutRect, pygame.Rect or (x, y, w, h) tuple."""
        if isinstance(rect, LayoutRect):
            return rect
        if isinstance(rect, pygame.Rect):
            return cls(float(rect.x), float(rect.y), float(rect.width), float(rect.height))
        x, y, width, height = rect
        return cls(float(x), float(y), float(width), float(height))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, padding: float) -> "LayoutRect":
        """Shrink the rect by padding on all four sides."""
        return LayoutRect(
            self.x + padding,
            self.y + padding,
            self.width - padding * 2,
            self.height - padding * 2,
        )

    def contains(self, point: Point) -> bool:
        """Check if point lies inside (left/top edges inclusive, right/bottom exclusive)."""
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.bottom

    def to_pygame(self) -> pygame.Rect:
        """Convert to an integer pygame.Rect."""
        return pygame.Rect(
            int(round(self.x)), int(round(self.y)),
            int(round(self.width)), int(round(self.height))
        )


@dataclass(frozen=True)
class AxisExtent:
    """Min/max range of one axis across all samples."""

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        """True when every sample shares the same value on this axis."""
        return self.max == self.min

    def normalize(self, value: float) -> float:
        """
        Rescale value into [0, 1] relative to this extent.

        A zero-width extent maps every value to the midpoint 0.5.
        """
        if self.is_degenerate:
            return 0.5
        return (value - self.min) / (self.max - self.min)

    def value_at(self, index: int, count: int) -> float:
        """Value of the index-th of count evenly spaced steps from min to max."""
        return self.min + index * (self.span / count)


@dataclass(frozen=True)
class GraphExtents:
    """Extents for both axes."""

    x: AxisExtent
    y: AxisExtent


def as_sample_array(samples: Sequence[Point] | np.ndarray) -> np.ndarray:
    """View samples as a float array of shape (n, 2)."""
    return np.asarray(samples, dtype=np.float64).reshape(-1, 2)


def compute_extents(samples: Sequence[Point] | np.ndarray) -> GraphExtents:
    """Compute x and y extents in a single pass over the samples."""
    data = as_sample_array(samples)
    if data.shape[0] == 0:
        raise ValueError("Cannot compute extents of an empty sample sequence")

    mins = data.min(axis=0)
    maxs = data.max(axis=0)
    extents = GraphExtents(
        x=AxisExtent(float(mins[0]), float(maxs[0])),
        y=AxisExtent(float(mins[1]), float(maxs[1])),
    )

    if extents.x.is_degenerate or extents.y.is_degenerate:
        logger.debug(f"Degenerate extent x={extents.x} y={extents.y}, using midpoint")

    return extents


def to_screen(inner: LayoutRect, nx: float, ny: float) -> Point:
    """Map normalized coordinates into the inner rect, flipping y."""
    return (
        inner.x + nx * inner.width,
        inner.y + (1 - ny) * inner.height
    )
