"""Color scheme for the line graph viewer."""

from dataclasses import dataclass
from typing import Tuple

# Type alias for RGB colors
RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Colors:
    """Color palette for the graph and its host window."""

    # Window
    BACKGROUND: RGB = (25, 28, 32)

    # Graph frame
    GRAPH_BACKGROUND: RGB = (38, 42, 48)
    GRAPH_BORDER: RGB = (65, 68, 75)

    # Lines, markers and labels
    GRAPH_DEFAULT: RGB = (255, 255, 255)
    GRAPH_HIGHLIGHT: RGB = (255, 0, 0)
    TEXT_PRIMARY: RGB = (235, 238, 245)
    TEXT_ACCENT: RGB = (110, 190, 235)
