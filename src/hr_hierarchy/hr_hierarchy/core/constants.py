"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Sibling ordering
TIE_EPSILON = 0.01
UNRESOLVED_PARENT_POSITION = 999.0

# Canvas
CONNECTOR_CURVE_OFFSET = 80
SETTLE_DELAY_SECONDS = 0.1
ZOOM_STEP = 0.1
ZOOM_MIN = 0.2
ZOOM_MAX_BUTTON = 2.0
ZOOM_MAX_WHEEL = 3.0
