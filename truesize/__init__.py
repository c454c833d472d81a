"""True-size map overlay core.

Relocates country and state silhouettes across a Mercator web map and
corrects their east-west extent for the scale factor at the destination
latitude, so a dragged shape keeps its true ground size.
"""

__version__ = "0.1.0"
