"""Text utilities for wrapping and positioning text fields."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from memepen.types import Coordinate

if TYPE_CHECKING:
    from memepen.design.template import TextStyle

# Measures the rendered width of a string in pixels for one font face
MeasureFunc = Callable[[str], float]


# ============================================================================
# Word Wrapping
# ============================================================================

def iter_wrapped_lines(text: str, measure: MeasureFunc, max_width: float) -> Iterator[str]:
    """
    Break text into lines that fit within max_width, yielding them in order.

    Uses a greedy algorithm that fills each line as much as possible and only
    breaks at whitespace. Explicit newlines start a new paragraph. A single word
    wider than max_width is placed alone on its own line; it is never hyphenated
    or truncated.

    Empty (or whitespace-only) input yields exactly one empty line, so callers
    can always rely on a line count of at least 1.

    Args:
        text: Text to wrap.
        measure: Width function of the font face (e.g. FreeTypeFont.getlength).
        max_width: Maximum line width in pixels.

    Yields:
        Wrapped lines, stripped of surrounding whitespace.
    """
    produced = False

    for paragraph in text.split("\n"):
        current_line = ""

        for word in paragraph.split():
            test_line = f"{current_line} {word}" if current_line else word

            if measure(test_line) <= max_width:
                current_line = test_line
                continue

            if current_line:
                # Current line is full, start new line with this word
                yield current_line
                produced = True
            current_line = word

            if measure(word) > max_width:
                # Single word doesn't fit, force it on its own line
                yield word
                produced = True
                current_line = ""

        if current_line:
            yield current_line
            produced = True

    if not produced:
        yield ""


def wrap_text(text: str, measure: MeasureFunc, max_width: float) -> list[str]:
    """
    Wrap text into a list of lines.

    See iter_wrapped_lines() for the wrapping rules.
    """
    return list(iter_wrapped_lines(text, measure, max_width))


# ============================================================================
# Field Geometry
# ============================================================================

def anchor_point(style: TextStyle, line_count: int) -> Coordinate:
    """
    Calculate the center point used to draw a field's wrapped text block.

    The horizontal center is the middle of the field box. The vertical center is
    pushed down by half a font size per line so that the top of the block stays
    near style.y. This assumes a uniform line height equal to the font size.

    Args:
        style: Text field style.
        line_count: Number of wrapped lines (at least 1).

    Returns:
        Anchor as (x, y) in canvas pixels.

    Raises:
        ValueError: If line_count is less than 1.
    """
    if line_count < 1:
        raise ValueError(f"line_count must be at least 1, got {line_count}")

    x = style.x + style.width / 2
    y = style.y + (style.font.size / 2) * line_count
    return (x, y)


def stroke_offsets(radius: int) -> Iterator[tuple[int, int]]:
    """
    Generate pixel offsets that approximate a filled disc of the given radius.

    Yields every integer (dx, dy) in [-radius, radius] with dx² + dy² < radius².
    Skipping the corners of the square gives the outline rounded corners. Radius 1
    yields only (0, 0); radius 2 yields 9 offsets.

    Args:
        radius: Stroke radius in pixels.

    Yields:
        (dx, dy) offsets, row by row.

    Raises:
        ValueError: If radius is negative.
    """
    if radius < 0:
        raise ValueError(f"Stroke radius must be non-negative, got {radius}")

    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy >= radius * radius:
                continue
            yield (dx, dy)


@dataclass(frozen=True)
class FieldLayout:
    """
    Wrapped lines and anchor of one text field.

    Attributes:
        lines: Wrapped lines (never empty).
        anchor: Center point of the block in canvas pixels.
    """

    lines: tuple[str, ...]
    anchor: Coordinate

    @classmethod
    def compute(cls, text: str, style: TextStyle, measure: MeasureFunc) -> FieldLayout:
        """
        Wrap text to the field width and derive the anchor.

        Args:
            text: Field text.
            style: Text field style.
            measure: Width function of the field's font face.

        Returns:
            FieldLayout for the field.
        """
        lines = tuple(iter_wrapped_lines(text, measure, style.width))
        return cls(lines=lines, anchor=anchor_point(style, len(lines)))
