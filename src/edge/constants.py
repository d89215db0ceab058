"""
Shared constants for the edge core.

These values are used by the geometry engine, the renderer and the
scene adapter. The SVG overlay uses the same numbers, so keep them in sync.
"""

# Endpoints closer than this collapse into a single point (edge is hidden)
DEGENERATE_DISTANCE = 20.0

# Pen width for the line and for the hit-test stroke
LINE_WIDTH = 2

# Stroke width used instead of a zero or negative pen width
PEN_WIDTH_ZERO = 0.00000001

# Length of each arrowhead wing
ARROW_SIZE = 15

# Colors
EDGE_COLOR = '#000000'        # black
TREE_EDGE_COLOR = '#006400'   # dark green
ARROW_FILL = '#ffff00'        # yellow
LABEL_COLOR = '#000000'
LABEL_FONT_SIZE = 12

# Number of segments used to approximate each round cap of the hit region
CAP_SEGMENTS = 8

DEFAULT_COST = 1
