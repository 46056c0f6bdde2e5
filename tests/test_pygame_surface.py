"""Tests for the pygame-backed draw surface (headless)."""

import math

import pygame
import pytest

from config.colors import Colors
from src.core.geometry import LayoutRect
from src.core.graph import Graph
from src.visualization.graph_renderer import GraphRenderer
from src.visualization.surface import LABEL_STYLE, TITLE_STYLE, PygameDrawSurface

BLACK = (0, 0, 0)


@pytest.fixture
def canvas():
    pygame.font.init()
    surf = pygame.Surface((200, 120))
    surf.fill(BLACK)
    return surf


@pytest.fixture
def draw_surface(canvas):
    return PygameDrawSurface(canvas, font_size=18, pointer_provider=lambda: (7, 9))


def pixel(canvas, x, y):
    return tuple(canvas.get_at((x, y)))[:3]


def test_draw_line(canvas, draw_surface):
    draw_surface.draw_line((10, 10), (100, 10), Colors.GRAPH_DEFAULT)
    assert pixel(canvas, 50, 10) == Colors.GRAPH_DEFAULT
    assert pixel(canvas, 50, 20) == BLACK


def test_draw_box_fills_and_outlines(canvas, draw_surface):
    draw_surface.draw_box(LayoutRect(10, 10, 50, 40), Colors.GRAPH_BACKGROUND, Colors.GRAPH_BORDER)
    assert pixel(canvas, 10, 10) == Colors.GRAPH_BORDER
    assert pixel(canvas, 30, 30) == Colors.GRAPH_BACKGROUND


def test_wire_marker_is_hollow(canvas, draw_surface):
    draw_surface.draw_wire_marker((50, 50), 5, Colors.GRAPH_HIGHLIGHT)
    assert pixel(canvas, 48, 48) == Colors.GRAPH_HIGHLIGHT
    assert pixel(canvas, 50, 50) == BLACK


def test_draw_text_changes_pixels(canvas, draw_surface):
    draw_surface.draw_text((5, 5), "12.5", TITLE_STYLE)
    region = [pixel(canvas, x, y) for x in range(5, 45) for y in range(5, 20)]
    assert any(p != BLACK for p in region)


def test_measure_text_uses_font_metrics(draw_surface):
    assert draw_surface.measure_text("") == 0
    assert draw_surface.measure_text("1000.0") > draw_surface.measure_text("1.0") > 0


def test_pointer_provider(draw_surface):
    assert draw_surface.current_pointer_position() == (7.0, 9.0)


def test_renders_full_graph(canvas, draw_surface):
    renderer = GraphRenderer(Graph("g", [(0, 0), (1, 3), (2, 1)]))
    renderer.config.padding = 20
    renderer.config.tick_count = 2
    renderer.render(canvas.get_rect(), None, draw_surface)

    # Bottom axis line of the inner rect (20, 20, 160, 80)
    assert pixel(canvas, 100, 100) == Colors.GRAPH_DEFAULT


def test_text_cache_reused(draw_surface):
    draw_surface.draw_text((0, 0), "a", LABEL_STYLE)
    draw_surface.draw_text((10, 0), "a", LABEL_STYLE)
    assert len(draw_surface._text_cache) == 1


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_primitives_are_skipped(canvas, draw_surface, bad):
    draw_surface.draw_line((10, 10), (bad, 10), Colors.GRAPH_DEFAULT)
    draw_surface.draw_wire_marker((bad, 50), 3, Colors.GRAPH_DEFAULT)
    draw_surface.draw_text((5, bad), "x", LABEL_STYLE)
    draw_surface.draw_box(LayoutRect(bad, 0, 10, 10), Colors.GRAPH_BACKGROUND, Colors.GRAPH_BORDER)

    assert pixel(canvas, 10, 10) == BLACK
    assert draw_surface._text_cache == {}


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_renders_graph_with_non_finite_samples(canvas, draw_surface, bad):
    repaints = []
    renderer = GraphRenderer(Graph("g", [(0, 0), (1, bad), (2, 1)]), request_repaint=lambda: repaints.append(1))
    renderer.config.padding = 20
    renderer.config.tick_count = 2

    renderer.render(canvas.get_rect(), None, draw_surface)

    assert repaints == [1]
    # Background and axes are still drawn
    assert pixel(canvas, 100, 100) == Colors.GRAPH_DEFAULT
