"""Drawing surfaces the graph renderer draws onto."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple
import math
import pygame

from config.colors import Colors, RGB
from src.core.geometry import LayoutRect, Point
from .axis import estimate_text_width


@dataclass(frozen=True)
class TextStyle:
    """Explicit style for one text draw call."""

    color: RGB = Colors.TEXT_PRIMARY
    bold: bool = False


LABEL_STYLE = TextStyle()
TITLE_STYLE = TextStyle(color=Colors.TEXT_PRIMARY, bold=True)
HIGHLIGHT_STYLE = TextStyle(color=Colors.GRAPH_HIGHLIGHT)


class DrawSurface(ABC):
    """
    Abstract drawing capability.

    Every call carries its own color/style so implementations hold no
    ambient drawing state between calls.
    """

    @abstractmethod
    def draw_line(self, start: Point, end: Point, color: RGB, width: int = 1) -> None:
        """Draw a straight line segment."""
        pass

    @abstractmethod
    def draw_box(self, rect: LayoutRect, fill: RGB, border: RGB) -> None:
        """Draw a filled box with a one pixel outline."""
        pass

    @abstractmethod
    def draw_wire_marker(self, center: Point, size: float, color: RGB) -> None:
        """Draw an unfilled square of the given size centered on a point."""
        pass

    @abstractmethod
    def draw_text(self, position: Point, text: str, style: TextStyle) -> None:
        """Draw text with its top-left corner at position."""
        pass

    @abstractmethod
    def current_pointer_position(self) -> Point:
        """Current pointer location in surface coordinates."""
        pass

    def measure_text(self, text: str) -> float:
        """Width of text in pixels. Subclasses with real font metrics override."""
        return estimate_text_width(text)


class PygameDrawSurface(DrawSurface):
    """DrawSurface backed by a pygame.Surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        font_size: int = 18,
        pointer_provider: Optional[Callable[[], Tuple[int, int]]] = None
    ) -> None:
        self.surface = surface
        self.pointer_provider = pointer_provider or pygame.mouse.get_pos

        pygame.font.init()
        self.font = pygame.font.Font(None, font_size)
        self.font_bold = pygame.font.Font(None, font_size)
        self.font_bold.set_bold(True)

        # Rendered text cache keyed by (text, color, bold)
        self._text_cache: Dict[Tuple[str, RGB, bool], pygame.Surface] = {}

    def draw_line(self, start: Point, end: Point, color: RGB, width: int = 1) -> None:
        if not _is_finite(start, end):
            return
        pygame.draw.line(self.surface, color, start, end, width)

    def draw_box(self, rect: LayoutRect, fill: RGB, border: RGB) -> None:
        if not _is_finite((rect.x, rect.y), (rect.width, rect.height)):
            return
        box = rect.to_pygame()
        pygame.draw.rect(self.surface, fill, box)
        pygame.draw.rect(self.surface, border, box, 1)

    def draw_wire_marker(self, center: Point, size: float, color: RGB) -> None:
        if not _is_finite(center):
            return
        half = size / 2
        marker = LayoutRect(center[0] - half, center[1] - half, size, size)
        pygame.draw.rect(self.surface, color, marker.to_pygame(), 1)

    def draw_text(self, position: Point, text: str, style: TextStyle) -> None:
        if not _is_finite(position):
            return
        key = (text, tuple(style.color), style.bold)
        rendered = self._text_cache.get(key)
        if rendered is None:
            font = self.font_bold if style.bold else self.font
            rendered = font.render(text, True, style.color)
            if len(self._text_cache) > 512:
                self._text_cache.clear()
            self._text_cache[key] = rendered
        self.surface.blit(rendered, (int(position[0]), int(position[1])))

    def current_pointer_position(self) -> Point:
        x, y = self.pointer_provider()
        return (float(x), float(y))

    def measure_text(self, text: str) -> float:
        return float(self.font.size(text)[0])


def _is_finite(*points: Point) -> bool:
    """Pixel placement needs finite coordinates; non-finite samples are skipped."""
    return all(math.isfinite(v) for point in points for v in point)
