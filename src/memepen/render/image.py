"""Image loading, encoding and background image repositories using Pillow."""

import logging
from collections.abc import Mapping
from io import BytesIO
from pathlib import Path
from typing import Protocol

from PIL import Image, UnidentifiedImageError

from memepen.exceptions import ImageNotFound

logger = logging.getLogger(__name__)


def load_image_from_bytes(image_data: bytes) -> Image.Image:
    """
    Load image from raw bytes.

    Args:
        image_data: Raw image bytes (JPEG, PNG, etc.).

    Returns:
        PIL Image object.
    """
    return Image.open(BytesIO(image_data))


def save_image_to_bytes(img: Image.Image, format: str = "PNG") -> bytes:
    """
    Save PIL Image to bytes.

    Args:
        img: PIL Image object.
        format: Image format (PNG, JPEG, etc.).

    Returns:
        Image as bytes.
    """
    buffer = BytesIO()
    img.save(buffer, format=format)
    return buffer.getvalue()


class ImageRepository(Protocol):
    """Anything that resolves a background image ID to a Pillow image."""

    def get(self, image_id: str) -> Image.Image:
        """Return a fresh RGBA copy of the image, raising ImageNotFound if unknown."""
        ...


class LocalImageRepository:
    """Background images stored as files on disk."""

    def __init__(self, paths: Mapping[str, Path]) -> None:
        """
        Initialize repository.

        Args:
            paths: Image ID → file path table.
        """
        self._paths = {image_id: Path(path) for image_id, path in paths.items()}

    def get(self, image_id: str) -> Image.Image:
        """
        Load a background image.

        Every call returns a new image, so callers may mutate it freely.

        Args:
            image_id: Image identifier.

        Returns:
            Image converted to RGBA.

        Raises:
            ImageNotFound: If the ID is unknown or the file is missing or unreadable.
        """
        path = self._paths.get(image_id)
        if path is None:
            raise ImageNotFound(image_id)

        try:
            with Image.open(path) as img:
                logger.debug(f"Loaded image {image_id} from {path} ({img.width}x{img.height})")
                return img.convert("RGBA")
        except FileNotFoundError as e:
            raise ImageNotFound(image_id, f"missing file {path}") from e
        except (UnidentifiedImageError, OSError) as e:
            raise ImageNotFound(image_id, f"unreadable file {path}: {e}") from e


class InMemoryImageRepository:
    """Background images held in memory."""

    def __init__(self, images: Mapping[str, Image.Image]) -> None:
        self._images = dict(images)

    def get(self, image_id: str) -> Image.Image:
        try:
            image = self._images[image_id]
        except KeyError:
            raise ImageNotFound(image_id) from None
        return image.convert("RGBA") if image.mode != "RGBA" else image.copy()
