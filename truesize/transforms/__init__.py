"""Pure geometry transforms.

Each transform is a stateless function over a single geometry:
- translate: Shift every vertex by the offset between two reference points
- scale_correction: Rescale east-west extent for the destination latitude
- relocate: Translate, then scale-correct
- centroid: Unweighted vertex-mean reference point
"""

from truesize.transforms.centroid import centroid_of
from truesize.transforms.relocate import relocate
from truesize.transforms.scale_correction import (
    clamp_latitude,
    correct_scale,
    effective_scale_factor,
    scale_factor,
)
from truesize.transforms.translate import translate

__all__ = [
    "centroid_of",
    "clamp_latitude",
    "correct_scale",
    "effective_scale_factor",
    "relocate",
    "scale_factor",
    "translate",
]
