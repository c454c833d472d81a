"""Draggable clone sessions.

- palette: Cycle clone colours in creation order
- clone: Hold one clone's original shape and relocate it per drag event
"""

from truesize.session.clone import DraggableClone
from truesize.session.palette import ClonePalette, CloneStyle

__all__ = ["ClonePalette", "CloneStyle", "DraggableClone"]
