"""Diagram page constants (SVG user units)."""

SVG_WIDTH = 300
SVG_HEIGHT = 250
PADDING = 30                      # margin around the triangle

LABEL_OFFSET = 5.0                # side label distance from its edge
ANGLE_LABEL_OFFSET = 14.0         # angle label distance from its vertex, toward centroid
SIDE_PRECISION = 1                # decimals on side labels
ANGLE_PRECISION = 1               # decimals on angle labels

STROKE = "#333"
FILL = "rgba(59,130,246,0.1)"
SIDE_COLOR = "#374151"
ANGLE_COLOR = "#2563eb"
PLACEHOLDER_COLOR = "#9ca3af"
PLACEHOLDER_TEXT = "Triangle diagram will appear here"
