#!/usr/bin/env python3
"""
Line Graph Viewer

A pygame window that plots a series of (x, y) samples as a line graph
with axis labels and hover inspection of individual points.

Run with: python main.py [--data samples.yaml]
"""

import sys
import argparse
import logging
from pathlib import Path

import pygame

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import Settings, get_settings
from config.colors import Colors
from src.core.graph import ArrayDataSource, demo_samples
from src.visualization.inspector import GraphInspector
from src.visualization.surface import PygameDrawSurface

logger = logging.getLogger(__name__)


class Application:
    """Main application class."""

    def __init__(self, args: argparse.Namespace) -> None:
        self.args = args
        self.settings = Settings.load(Path(args.config)) if args.config else get_settings()
        self.running = False

        # Override settings from args
        if args.width:
            self.settings.display.window_width = args.width
        if args.height:
            self.settings.display.window_height = args.height

        # Pygame setup
        pygame.init()
        pygame.display.set_caption(self.settings.display.title)

        self.screen = pygame.display.set_mode((
            self.settings.display.window_width,
            self.settings.display.window_height
        ))

        self.clock = pygame.time.Clock()

        # Data and graph
        self._demo_seed = 0
        self.source = self._load_source()
        self.surface = PygameDrawSurface(self.screen, self.settings.display.font_size)
        self.inspector = GraphInspector(
            args.name,
            self.source,
            self.settings.graph,
            request_repaint=self._on_repaint_requested
        )

        # Redraw on demand rather than every frame
        self._dirty = True
        self._needs_flip = False

    def _load_source(self) -> ArrayDataSource:
        """Load samples from --data, or generate a demo series."""
        if self.args.data:
            source = ArrayDataSource.from_yaml(self.args.data)
            logger.info(f"Loaded {len(source.graph_data)} samples from {self.args.data}")
            return source
        return ArrayDataSource(demo_samples(self.args.count, seed=self._demo_seed))

    def run(self) -> None:
        """Main application loop."""
        self.running = True

        while self.running:
            self._handle_events()

            if self._dirty:
                self._render()

            if self._needs_flip:
                pygame.display.flip()
                self._needs_flip = False

            self.clock.tick(self.settings.display.fps_target)

        pygame.quit()

    def _render(self) -> None:
        """Render a complete frame."""
        self._dirty = False
        self.screen.fill(Colors.BACKGROUND)
        self.inspector.draw(
            self.surface,
            origin=(self.settings.display.graph_x, self.settings.display.graph_y)
        )
        self._draw_help()

        # Empty graphs draw nothing and never request a repaint, but the
        # cleared background still has to reach the screen
        if self.inspector.renderer.graph.is_empty:
            self._needs_flip = True

    def _on_repaint_requested(self) -> None:
        self._needs_flip = True

    def _handle_events(self) -> None:
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEMOTION:
                self._dirty = True

            elif event.type == pygame.WINDOWEXPOSED:
                self._dirty = True

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press events."""
        if event.key == pygame.K_ESCAPE:
            self.running = False

        elif event.key == pygame.K_r:
            if self.args.data:
                self.source.set_samples(ArrayDataSource.from_yaml(self.args.data).graph_data)
                logger.info(f"Reloaded samples from {self.args.data}")
            else:
                self._demo_seed += 1
                self.source.set_samples(demo_samples(self.args.count, seed=self._demo_seed))
                logger.debug(f"Generated demo samples with seed {self._demo_seed}")
            self._dirty = True

    def _draw_help(self) -> None:
        """Draw key hints along the bottom edge."""
        font = pygame.font.Font(None, 20)
        reload_hint = "reload data" if self.args.data else "new demo data"
        text_surface = font.render(f"R: {reload_hint} | Esc: quit", True, Colors.TEXT_ACCENT)
        self.screen.blit(
            text_surface,
            (10, self.settings.display.window_height - text_surface.get_height() - 8)
        )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Line Graph Viewer - plot (x, y) samples with hover inspection"
    )

    parser.add_argument(
        "-d", "--data",
        type=str,
        help="Path to YAML file with a list of [x, y] samples"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to settings YAML file"
    )

    parser.add_argument(
        "--name",
        type=str,
        default="Line Graph",
        help="Graph name shown above the plot"
    )

    parser.add_argument(
        "--count",
        type=int,
        default=40,
        help="Number of demo samples when no data file is given"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Window width"
    )

    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Window height"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        app = Application(args)
        app.run()
    except KeyboardInterrupt:
        print("\nExiting...")
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
