"""Line graph renderer with axis labels and hover inspection."""

import logging
from typing import Callable, Optional, Tuple

from config.colors import Colors
from config.constants import (
    HIT_BOX_HALF_HEIGHT,
    HIT_BOX_WIDTH,
    LINE_WIDTH,
    MARKER_SIZE,
    NAME_LABEL_OFFSET,
)
from config.settings import GraphConfig
from src.core.geometry import (
    GraphExtents,
    LayoutRect,
    Point,
    RectLike,
    as_sample_array,
    compute_extents,
    to_screen,
)
from src.core.graph import Graph, Samples
from .axis import TextMeasure, compute_ticks, effective_tick_count, format_sample
from .surface import DrawSurface, HIGHLIGHT_STYLE, LABEL_STYLE, TITLE_STYLE

logger = logging.getLogger(__name__)


def hit_rect(point: Point) -> LayoutRect:
    """Hover region for a point: a narrow, tall box starting at the point."""
    return LayoutRect(
        point[0],
        point[1] - HIT_BOX_HALF_HEIGHT,
        HIT_BOX_WIDTH,
        HIT_BOX_HALF_HEIGHT * 2,
    )


class GraphRenderer:
    """
    Renders one Graph as a line plot.

    Each call to render() draws a complete frame: name label, background,
    polyline with point markers, hover value labels and axis tick labels.
    The host owns the frame loop and is notified through request_repaint.

    Every interior point is drawn twice, once as the end of one segment and
    once as the start of the next.
    """

    def __init__(
        self,
        graph: Graph,
        config: Optional[GraphConfig] = None,
        request_repaint: Optional[Callable[[], None]] = None,
        measure_text: Optional[TextMeasure] = None
    ) -> None:
        self.graph = graph
        self.config = config or GraphConfig()
        self.request_repaint = request_repaint
        self.measure_text = measure_text

    @property
    def name(self) -> str:
        return self.graph.name

    def update_data(self, samples: Optional[Samples]) -> None:
        """Replace the samples used by the next render."""
        self.graph.update_data(samples)

    def preferred_rect(self, origin: Tuple[float, float] = (0, 0)) -> LayoutRect:
        """Outer rect of the configured size at origin."""
        return LayoutRect(origin[0], origin[1], self.config.width, self.config.height)

    def render(
        self,
        outer_rect: RectLike,
        pointer_position: Optional[Point],
        surface: DrawSurface
    ) -> None:
        """
        Draw the graph into outer_rect.

        Args:
            outer_rect: Allocated area before padding
            pointer_position: Cursor location, or None to query the surface
            surface: Surface to draw on
        """
        if self.graph.is_empty:
            logger.debug(f"Graph '{self.name}' has no samples, skipping render")
            return

        data = as_sample_array(self.graph.samples)
        if pointer_position is None:
            pointer_position = surface.current_pointer_position()

        inner = LayoutRect.from_rect(outer_rect).inset(self.config.padding)

        surface.draw_text(
            (inner.x, inner.y - NAME_LABEL_OFFSET),
            self.name,
            TITLE_STYLE
        )
        self._draw_background(surface, inner)

        extents = compute_extents(data)

        for i in range(len(data) - 1):
            sample_a = (float(data[i, 0]), float(data[i, 1]))
            sample_b = (float(data[i + 1, 0]), float(data[i + 1, 1]))

            pos_a = self._sample_to_screen(inner, extents, sample_a)
            pos_b = self._sample_to_screen(inner, extents, sample_b)

            surface.draw_line(pos_a, pos_b, Colors.GRAPH_DEFAULT, LINE_WIDTH)

            self._draw_point(surface, pos_a, sample_a, pointer_position)
            self._draw_point(surface, pos_b, sample_b, pointer_position)

        self._draw_labels(surface, inner, extents, len(data))

        if self.request_repaint is not None:
            self.request_repaint()

    def _sample_to_screen(
        self,
        inner: LayoutRect,
        extents: GraphExtents,
        sample: Tuple[float, float]
    ) -> Point:
        return to_screen(
            inner,
            extents.x.normalize(sample[0]),
            extents.y.normalize(sample[1])
        )

    def _draw_background(self, surface: DrawSurface, inner: LayoutRect) -> None:
        """Draw the graph box plus the bottom and left axis lines."""
        surface.draw_box(inner, Colors.GRAPH_BACKGROUND, Colors.GRAPH_BORDER)

        surface.draw_line(
            (inner.x, inner.bottom),
            (inner.right, inner.bottom),
            Colors.GRAPH_DEFAULT,
            LINE_WIDTH
        )
        surface.draw_line(
            (inner.x, inner.y),
            (inner.x, inner.bottom),
            Colors.GRAPH_DEFAULT,
            LINE_WIDTH
        )

    def _draw_point(
        self,
        surface: DrawSurface,
        position: Point,
        sample: Tuple[float, float],
        pointer_position: Point
    ) -> None:
        """Draw the marker for one point, with a value label when hovered."""
        hot = hit_rect(position).contains(pointer_position)
        if hot:
            surface.draw_text(position, format_sample(*sample), HIGHLIGHT_STYLE)

        color = Colors.GRAPH_HIGHLIGHT if hot else Colors.GRAPH_DEFAULT
        surface.draw_wire_marker(position, MARKER_SIZE, color)

    def _draw_labels(
        self,
        surface: DrawSurface,
        inner: LayoutRect,
        extents: GraphExtents,
        sample_count: int
    ) -> None:
        tick_count = effective_tick_count(self.config.tick_count, sample_count)
        measure = self.measure_text or surface.measure_text

        for tick in compute_ticks(inner, extents, tick_count, measure):
            surface.draw_text(tick.position, tick.text, LABEL_STYLE)
