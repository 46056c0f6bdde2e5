"""Host glue binding a data source to a graph renderer."""

from typing import Callable, Optional, Tuple

from config.settings import GraphConfig
from src.core.geometry import LayoutRect, Point
from src.core.graph import DataSource, Graph
from .graph_renderer import GraphRenderer
from .surface import DrawSurface


class GraphInspector:
    """
    Draws a data source's samples as a line graph once per host redraw.

    The renderer is created lazily on the first draw; later draws push the
    source's current samples into it before rendering.
    """

    def __init__(
        self,
        name: str,
        source: DataSource,
        config: Optional[GraphConfig] = None,
        request_repaint: Optional[Callable[[], None]] = None
    ) -> None:
        self.name = name
        self.source = source
        self.config = config or GraphConfig()
        self.request_repaint = request_repaint
        self.renderer: Optional[GraphRenderer] = None

    def draw(
        self,
        surface: DrawSurface,
        origin: Tuple[float, float] = (0, 0),
        pointer_position: Optional[Point] = None
    ) -> LayoutRect:
        """Render the current samples and return the allocated outer rect."""
        if self.renderer is None:
            graph = Graph(self.name, self.source.get_samples())
            self.renderer = GraphRenderer(graph, self.config, self.request_repaint)
        else:
            self.renderer.update_data(self.source.get_samples())

        outer = self.renderer.preferred_rect(origin)
        self.renderer.render(outer, pointer_position, surface)
        return outer
