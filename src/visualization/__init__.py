"""Graph rendering."""

from .axis import AxisTick, compute_ticks, estimate_text_width
from .graph_renderer import GraphRenderer, hit_rect
from .inspector import GraphInspector
from .surface import DrawSurface, PygameDrawSurface, TextStyle

__all__ = [
    "AxisTick",
    "compute_ticks",
    "estimate_text_width",
    "GraphRenderer",
    "hit_rect",
    "GraphInspector",
    "DrawSurface",
    "PygameDrawSurface",
    "TextStyle",
]
