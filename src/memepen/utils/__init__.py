"""Utility modules."""

from memepen.utils.text import (
    FieldLayout,
    MeasureFunc,
    anchor_point,
    iter_wrapped_lines,
    stroke_offsets,
    wrap_text,
)

__all__ = [
    "FieldLayout",
    "MeasureFunc",
    "anchor_point",
    "iter_wrapped_lines",
    "stroke_offsets",
    "wrap_text",
]
