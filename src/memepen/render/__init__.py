"""Raster canvas and image handling."""

from memepen.render.canvas import Canvas
from memepen.render.image import (
    ImageRepository,
    InMemoryImageRepository,
    LocalImageRepository,
    load_image_from_bytes,
    save_image_to_bytes,
)

__all__ = [
    "Canvas",
    "ImageRepository",
    "InMemoryImageRepository",
    "LocalImageRepository",
    "load_image_from_bytes",
    "save_image_to_bytes",
]
