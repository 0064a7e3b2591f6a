"""Font resources and font repositories."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Protocol

from PIL import ImageFont

from memepen.exceptions import FontNotFound
from memepen.fonts.google import get_google_font

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf")

# Font files looked up relative to the working directory unless configured otherwise
DEFAULT_FONT_PATHS: dict[str, Path] = {
    "Impact": Path("assets/fonts/impact.ttf"),
    "Arial": Path("assets/fonts/arial.ttf"),
}


@dataclass(frozen=True)
class FontResource:
    """
    Raw font file data for one family.

    The resource is read-only; every call to face() builds an independent
    Pillow face, so a resource can be shared between compositions.
    """

    family: str
    data: bytes = field(repr=False)

    def face(self, size: float) -> ImageFont.FreeTypeFont:
        """
        Create a font face at the given size.

        Args:
            size: Font size in points (rendered 1:1 as pixels).

        Returns:
            Pillow FreeType font.
        """
        return ImageFont.truetype(BytesIO(self.data), size)


class FontRepository(Protocol):
    """Anything that resolves a family name to a FontResource."""

    def get(self, family: str) -> FontResource:
        """Resolve a family, raising FontNotFound if it is unknown."""
        ...


def normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Converts hyphen-separated parts to Title Case to match PostScript naming.

    Examples:
        "impact" → "Impact"
        "roboto-mono" → "Roboto-Mono"
        "ARIAL" → "Arial"

    Args:
        name: Font name to normalize (can be any case)

    Returns:
        TitleCase font name
    """
    parts = name.strip().split("-")
    return "-".join(part.title() for part in parts)


class LocalFontRepository:
    """
    Font repository backed by files on disk.

    Families come from an explicit family → path table plus any font files found
    in the given directories (registered under their TitleCase file stem, so
    ``impact.ttf`` serves "Impact"). Lookups are case-insensitive. Font bytes are
    read once per family and cached in the repository.
    """

    def __init__(
        self,
        paths: Mapping[str, Path] | None = None,
        directories: Iterable[Path] = (),
    ) -> None:
        """
        Initialize repository.

        Args:
            paths: Explicit font family → file path table.
            directories: Directories to scan for .ttf/.otf files.
        """
        self._paths: dict[str, Path] = {}
        self._cache: dict[str, FontResource] = {}

        for directory in directories:
            self._discover(Path(directory))

        # Explicit paths win over discovered files
        for family, path in (paths or {}).items():
            self._paths[normalize_font_name(family)] = Path(path)

    def _discover(self, directory: Path) -> None:
        if not directory.is_dir():
            logger.warning(f"Font directory {directory} does not exist, skipping")
            return

        font_files = sorted(p for p in directory.iterdir() if p.suffix.lower() in FONT_EXTENSIONS)
        if not font_files:
            logger.warning(f"No font files found in {directory}")

        for font_path in font_files:
            font_name = normalize_font_name(font_path.stem)
            self._paths[font_name] = font_path
            logger.debug(f"Discovered font: {font_name} from {font_path.name}")

    @property
    def families(self) -> list[str]:
        """Known family names (normalized)."""
        return sorted(self._paths)

    def get(self, family: str) -> FontResource:
        """
        Get the font resource for a family.

        Args:
            family: Font family name, case-insensitive.

        Returns:
            FontResource with the file contents.

        Raises:
            FontNotFound: If the family is unknown or its file can't be read.
        """
        font_name = normalize_font_name(family)

        if font_name in self._cache:
            logger.debug(f"Font '{font_name}' found in cache")
            return self._cache[font_name]

        path = self._paths.get(font_name)
        if path is None:
            raise FontNotFound(family)

        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning(f"Failed to read font {font_name} from {path}: {e}")
            raise FontNotFound(family) from e

        resource = FontResource(family=font_name, data=data)
        self._cache[font_name] = resource
        logger.info(f"Loaded font: {font_name} from {path}")
        return resource


class GoogleFontRepository:
    """
    Font repository that downloads families from Google Fonts.

    When a fallback repository is given it is asked first, so local files
    always win over downloads.
    """

    def __init__(self, fallback: FontRepository | None = None, weight: int = 400) -> None:
        """
        Initialize repository.

        Args:
            fallback: Repository to consult before downloading.
            weight: Font weight to download (e.g. 400 regular, 700 bold).
        """
        self.fallback = fallback
        self.weight = weight
        self._cache: dict[str, FontResource] = {}

    def get(self, family: str) -> FontResource:
        """
        Get the font resource for a family, downloading it if needed.

        Raises:
            FontNotFound: If neither the fallback nor Google Fonts has the family.
        """
        if self.fallback is not None:
            try:
                return self.fallback.get(family)
            except FontNotFound:
                logger.info(f"Font '{family}' not found locally, trying Google Fonts...")

        font_name = normalize_font_name(family)
        if font_name in self._cache:
            return self._cache[font_name]

        font_path = get_google_font(family, self.weight)
        if font_path is None:
            raise FontNotFound(family)

        try:
            data = font_path.read_bytes()
        except OSError as e:
            logger.warning(f"Failed to read downloaded font {font_name} from {font_path}: {e}")
            raise FontNotFound(family) from e

        resource = FontResource(family=font_name, data=data)
        self._cache[font_name] = resource
        return resource


class InMemoryFontRepository:
    """Font repository over resources that are already loaded."""

    def __init__(self, resources: Iterable[FontResource]) -> None:
        self._resources = {normalize_font_name(r.family): r for r in resources}

    def get(self, family: str) -> FontResource:
        try:
            return self._resources[normalize_font_name(family)]
        except KeyError:
            raise FontNotFound(family) from None


__all__ = [
    "DEFAULT_FONT_PATHS",
    "FontRepository",
    "FontResource",
    "GoogleFontRepository",
    "InMemoryFontRepository",
    "LocalFontRepository",
    "normalize_font_name",
]
