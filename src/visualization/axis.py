"""Axis tick generation and label formatting."""

import math
from dataclasses import dataclass
from typing import Callable, List

from config.constants import LABEL_CHAR_WIDTH, X_LABEL_OFFSET
from src.core.geometry import GraphExtents, LayoutRect, Point

TextMeasure = Callable[[str], float]


@dataclass(frozen=True)
class AxisTick:
    """One tick label anchored on an axis."""

    axis: str  # "x" or "y"
    index: int
    value: float
    text: str
    position: Point


def estimate_text_width(text: str) -> float:
    """Approximate rendered width from the character count."""
    return LABEL_CHAR_WIDTH * len(text)


def format_x_tick(value: float) -> str:
    """X ticks show the value truncated toward zero."""
    if not math.isfinite(value):
        return str(value)
    return str(int(value))


def format_y_tick(value: float) -> str:
    """Y ticks show one decimal place."""
    return f"{value:.1f}"


def format_sample(x: float, y: float) -> str:
    """Hover label for a sample value."""
    return f"({x:.2f}, {y:.2f})"


def effective_tick_count(configured: int, sample_count: int) -> int:
    """Never show more tick intervals than there are samples."""
    return min(configured, sample_count)


def compute_ticks(
    inner: LayoutRect,
    extents: GraphExtents,
    tick_count: int,
    measure: TextMeasure = estimate_text_width
) -> List[AxisTick]:
    """
    Build tick labels for both axes.

    Produces tick_count + 1 evenly spaced labels per axis, from the extent
    minimum at index 0 to the maximum at index tick_count. X labels sit
    below the inner rect; y labels sit left of it, offset by their
    measured width.

    Args:
        inner: Padded drawing rect
        extents: Data extents for both axes
        tick_count: Number of intervals per axis
        measure: Text width function used to right-align y labels

    Returns:
        X ticks followed by y ticks for each index, in index order
    """
    if tick_count < 1:
        return []

    ticks: List[AxisTick] = []
    x_spacing = inner.width / tick_count
    y_spacing = inner.height / tick_count

    for i in range(tick_count + 1):
        x_value = extents.x.value_at(i, tick_count)
        y_value = extents.y.value_at(i, tick_count)

        x_text = format_x_tick(x_value)
        y_text = format_y_tick(y_value)

        ticks.append(AxisTick(
            axis="x",
            index=i,
            value=x_value,
            text=x_text,
            position=(inner.x + i * x_spacing, inner.bottom + X_LABEL_OFFSET),
        ))
        ticks.append(AxisTick(
            axis="y",
            index=i,
            value=y_value,
            text=y_text,
            position=(inner.x - measure(y_text), inner.y + (tick_count - i) * y_spacing),
        ))

    return ticks
