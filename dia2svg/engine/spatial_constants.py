"""Shared geometric constants for stroke detection and rendering.

Coordinates are in character cells. Sub-cell nudges are multiples of a
quarter cell so endpoints from different passes compare exactly.
"""

import math

# Pixels per character horizontally.
SCALE = 8

# Y coordinates are multiplied by this when generating SVG to account for
# the aspect ratio of monospace text. Diagonal arrow angles depend on it,
# so it MUST be 2.
ASPECT = 2

# Angle of a one-cell diagonal step once the aspect ratio is applied.
DIAGONAL_ANGLE = math.atan(1.0 / ASPECT) * 180 / math.pi

EPSILON = 1e-6

# Stretch a stroke end to meet an adjoining line, underscore or jump.
HALF_CELL = 0.5

# Stretch a diagonal end toward a point glyph beyond it.
QUARTER_CELL = 0.25

# Tangent control point of a quarter-circle corner, past the corner cell
# along the horizontal rule. Tuned by eye.
CORNER_TANGENT_OFFSET = 1.1

# Tangent control point of a ( or ) lens connector. Tuned by eye.
LENS_TANGENT_OFFSET = 0.6

# Half-width of a jump bridge.
JUMP_BULGE = 0.75
