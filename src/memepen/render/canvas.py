"""Mutable raster canvas with a scoped rotation stack."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from PIL import Image, ImageDraw

from memepen.types import Coordinate


@dataclass
class _RotationFrame:
    """A pushed rotation: the layer collecting draws and how to rotate it back in."""

    layer: Image.Image
    degrees: float
    pivot: Coordinate


class Canvas:
    """
    RGBA raster that one composition draws onto.

    Draws go to the current surface: the base image when no rotation is active,
    otherwise a transparent layer opened by push_rotation(). Popping the rotation
    turns that layer about its pivot and composites it onto the surface below, so
    a rotation only ever affects the draws made while it was pushed.

    A Canvas is owned by a single composition and is never shared.
    """

    def __init__(self, image: Image.Image) -> None:
        """
        Initialize canvas from a background image.

        Args:
            image: Background image. It is copied, the caller's image is never mutated.
        """
        self._base = image.convert("RGBA") if image.mode != "RGBA" else image.copy()
        self._frames: list[_RotationFrame] = []

    @property
    def size(self) -> tuple[int, int]:
        """Canvas size as (width, height) in pixels."""
        return self._base.size

    @property
    def depth(self) -> int:
        """Number of rotations currently pushed."""
        return len(self._frames)

    @property
    def _surface(self) -> Image.Image:
        return self._frames[-1].layer if self._frames else self._base

    def draw(self) -> ImageDraw.ImageDraw:
        """Get a drawing context bound to the current surface."""
        return ImageDraw.Draw(self._surface)

    def push_rotation(self, degrees: float, pivot: Coordinate) -> None:
        """
        Start a rotated frame.

        Args:
            degrees: Rotation angle. Positive values turn clockwise on screen.
            pivot: Point to rotate about, in canvas pixels.
        """
        layer = Image.new("RGBA", self._base.size, (0, 0, 0, 0))
        self._frames.append(_RotationFrame(layer=layer, degrees=degrees, pivot=pivot))

    def pop_rotation(self, commit: bool = True) -> None:
        """
        End the innermost rotated frame.

        Args:
            commit: Composite the rotated layer onto the surface below. When False
                    the layer and everything drawn on it are discarded.

        Raises:
            RuntimeError: If no rotation is pushed.
        """
        if not self._frames:
            raise RuntimeError("pop_rotation() called without a matching push_rotation()")

        frame = self._frames.pop()
        if not commit:
            return

        # Pillow rotates counter-clockwise, screen coordinates have y pointing down
        rotated = frame.layer.rotate(
            -frame.degrees,
            resample=Image.Resampling.BICUBIC,
            center=frame.pivot,
        )
        self._surface.alpha_composite(rotated)

    @contextmanager
    def rotated(self, degrees: float | None, pivot: Coordinate) -> Iterator["Canvas"]:
        """
        Scope a rotation around a single block of draws.

        The rotation is popped on every exit path. If the body raises, whatever
        it drew under the rotation is discarded before the exception propagates.

        Args:
            degrees: Rotation angle, or None for no rotation.
            pivot: Point to rotate about.

        Yields:
            This canvas.
        """
        if degrees is None:
            yield self
            return

        self.push_rotation(degrees, pivot)
        try:
            yield self
        except BaseException:
            self.pop_rotation(commit=False)
            raise
        self.pop_rotation()

    def to_image(self) -> Image.Image:
        """
        Get the finished image.

        Returns:
            Copy of the composited canvas.

        Raises:
            RuntimeError: If a rotation is still pushed.
        """
        if self._frames:
            raise RuntimeError(f"Canvas still has {len(self._frames)} rotation(s) pushed")
        return self._base.copy()
