"""Clone styling.

Each new clone takes the next colour of the palette, wrapping around
after the last one.
"""

from __future__ import annotations

from dataclasses import dataclass

from truesize.core.constants import CLONE_FILL_OPACITY, CLONE_STROKE_WEIGHT, DEFAULT_PALETTE


@dataclass(frozen=True, slots=True)
class CloneStyle:
    """Path style handed to the map layer for one clone."""

    color: str
    fill_color: str
    weight: int = CLONE_STROKE_WEIGHT
    fill_opacity: float = CLONE_FILL_OPACITY

    def to_dict(self) -> dict[str, object]:
        """Serialise with the map layer's camelCase option names."""
        return {
            "color": self.color,
            "weight": self.weight,
            "fillColor": self.fill_color,
            "fillOpacity": self.fill_opacity,
        }


class ClonePalette:
    """Hands out clone styles in palette order."""

    def __init__(self, colors: tuple[str, ...] = DEFAULT_PALETTE) -> None:
        if not colors:
            msg = "palette needs at least one colour"
            raise ValueError(msg)
        self.colors = colors
        self._issued = 0

    @property
    def issued(self) -> int:
        """Number of styles handed out so far."""
        return self._issued

    def next_style(self) -> CloneStyle:
        color = self.colors[self._issued % len(self.colors)]
        self._issued += 1
        return CloneStyle(color=color, fill_color=color)
