"""Shared fixtures: headless pygame and a draw-call recording surface."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from dataclasses import dataclass
from typing import Any, List, Tuple

import pytest

from config.settings import GraphConfig
from src.core.geometry import LayoutRect
from src.visualization.surface import DrawSurface


@dataclass(frozen=True)
class DrawCall:
    """One recorded drawing operation."""

    kind: str
    args: Tuple[Any, ...]


class RecordingSurface(DrawSurface):
    """DrawSurface that records every call instead of drawing."""

    def __init__(self, pointer: Tuple[float, float] = (-10_000.0, -10_000.0)) -> None:
        self.pointer = pointer
        self.calls: List[DrawCall] = []

    def draw_line(self, start, end, color, width=1) -> None:
        self.calls.append(DrawCall("line", (tuple(start), tuple(end), color, width)))

    def draw_box(self, rect, fill, border) -> None:
        self.calls.append(DrawCall("box", (rect, fill, border)))

    def draw_wire_marker(self, center, size, color) -> None:
        self.calls.append(DrawCall("marker", (tuple(center), size, color)))

    def draw_text(self, position, text, style) -> None:
        self.calls.append(DrawCall("text", (tuple(position), text, style)))

    def current_pointer_position(self):
        return self.pointer

    def of_kind(self, kind: str) -> List[DrawCall]:
        return [c for c in self.calls if c.kind == kind]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def config() -> GraphConfig:
    return GraphConfig()


@pytest.fixture
def outer_rect() -> LayoutRect:
    # Inner rect becomes (45, 45, 1110, 310) with default padding
    return LayoutRect(0, 0, 1200, 400)
