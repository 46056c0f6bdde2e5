"""Centralized constants for graph layout and interaction."""

# Labels
NAME_LABEL_OFFSET = 10.0    # Graph name sits this far above the inner rect
X_LABEL_OFFSET = 10.0       # X tick labels sit this far below the inner rect
LABEL_CHAR_WIDTH = 7.5      # Estimated pixels per character of tick text

# Hover hit box, anchored at the point's screen position
HIT_BOX_WIDTH = 15.0
HIT_BOX_HALF_HEIGHT = 150.0

# Point markers
MARKER_SIZE = 3.0

# Line widths
LINE_WIDTH = 1
