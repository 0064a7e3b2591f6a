"""Uploaders for rendered images and the meme record store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import requests
from PIL import Image

from memepen.config import StorageConfig
from memepen.exceptions import MemeNotFound, UploadFailure
from memepen.render.image import save_image_to_bytes

if TYPE_CHECKING:
    from memepen.api.models import Meme

logger = logging.getLogger(__name__)


# ============================================================================
# Uploaders
# ============================================================================

class Uploader(Protocol):
    """Stores a rendered image as PNG under a path (without extension)."""

    def upload_png(self, path: str, image: Image.Image) -> None:
        """Upload image, raising UploadFailure on any error."""
        ...


def _encode_png(path: str, image: Image.Image) -> bytes:
    if image.width == 0 or image.height == 0:
        raise UploadFailure(path, f"image has no pixels ({image.width}x{image.height})")
    try:
        return save_image_to_bytes(image, format="PNG")
    except (OSError, ValueError) as e:
        raise UploadFailure(path, f"PNG encoding failed: {e}") from e


class LocalUploader:
    """Writes PNG files below a root directory."""

    def __init__(self, root: Path = Path(".")) -> None:
        """
        Initialize uploader.

        Args:
            root: Directory that upload paths are relative to.
        """
        self.root = Path(root)

    def upload_png(self, path: str, image: Image.Image) -> None:
        """
        Write image to <root>/<path>.png.

        The parent directory must already exist; it is not created.

        Raises:
            UploadFailure: If the image is empty or the file can't be written.
        """
        target = self.root / f"{path}.png"
        if not target.parent.is_dir():
            raise UploadFailure(path, f"directory {target.parent} does not exist")

        data = _encode_png(path, image)
        try:
            target.write_bytes(data)
        except OSError as e:
            raise UploadFailure(path, str(e)) from e

        logger.info(f"Saved {image.width}x{image.height} PNG to {target}")


class NoopUploader:
    """Accepts every upload and stores nothing."""

    def upload_png(self, path: str, image: Image.Image) -> None:
        logger.debug(f"Discarding upload to {path}")


class HttpUploader:
    """PUTs PNG bytes to <base_url>/<path>.png, e.g. a pre-authorized bucket endpoint."""

    def __init__(self, base_url: str, timeout: float = 30.0, session: requests.Session | None = None) -> None:
        """
        Initialize uploader.

        Args:
            base_url: URL prefix that upload paths are appended to.
            timeout: Request timeout in seconds.
            session: Optional requests session (for auth headers, retries, tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def upload_png(self, path: str, image: Image.Image) -> None:
        """
        Upload image with an HTTP PUT.

        Raises:
            UploadFailure: If the image is empty, the request fails or the server
                           answers with a non-2xx status.
        """
        data = _encode_png(path, image)
        url = f"{self.base_url}/{path.lstrip('/')}.png"

        try:
            response = self.session.put(
                url,
                data=data,
                headers={"Content-Type": "image/png"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise UploadFailure(path, str(e)) from e

        logger.info(f"Uploaded {len(data)} bytes to {url}")


def make_uploader(config: StorageConfig) -> Uploader:
    """
    Create the uploader selected in configuration.

    Args:
        config: Storage configuration.

    Returns:
        Uploader instance.

    Raises:
        ValueError: If the http uploader is selected without a URL.
    """
    if config.uploader == "noop":
        return NoopUploader()
    if config.uploader == "http":
        if not config.url:
            raise ValueError("storage.url is required when storage.uploader is 'http'")
        return HttpUploader(config.url, timeout=config.timeout)
    return LocalUploader(config.root)


# ============================================================================
# Meme Records
# ============================================================================

class InMemoryMemeRepository:
    """Keeps created meme records in memory."""

    def __init__(self) -> None:
        self._memes: dict[str, Meme] = {}

    def create(self, meme: Meme) -> None:
        """Store a meme record."""
        self._memes[meme.id] = meme

    def get(self, meme_id: str) -> Meme:
        """
        Get a meme record by ID.

        Raises:
            MemeNotFound: If no meme has this ID.
        """
        try:
            return self._memes[meme_id]
        except KeyError:
            raise MemeNotFound(meme_id) from None

    def list(self) -> list[Meme]:
        """Return all memes in creation order."""
        return list(self._memes.values())
