"""Google Fonts downloads with an on-disk TTF cache."""

import logging
import re
from pathlib import Path
from typing import Optional

import requests

logger = logging.getLogger(__name__)

CACHE_DIR = Path.home() / ".cache" / "memepen" / "fonts"

# The v1 CSS endpoint serves truetype sources when no browser user agent is sent
CSS_URL = "https://fonts.googleapis.com/css"

CSS_TIMEOUT = 10
FONT_TIMEOUT = 30

_SRC_URL = re.compile(r"src:\s*url\((https://[^)]+\.ttf)\)")
_ANY_TTF_URL = re.compile(r"(https://[^\s'\"]+\.ttf)")


def font_cache_path(family: str, weight: int, cache_dir: Path | None = None) -> Path:
    """Cache location of a family/weight, e.g. ``Roboto Mono`` 700 → ``RobotoMono-700.ttf``."""
    return (cache_dir or CACHE_DIR) / f"{family.replace(' ', '')}-{weight}.ttf"


def extract_font_url_from_css(css_content: str) -> Optional[str]:
    """
    Find the TTF URL in a Google Fonts stylesheet.

    Prefers the ``src: url(...)`` of an @font-face rule and falls back to the
    first .ttf URL anywhere in the stylesheet.

    Args:
        css_content: Stylesheet returned by the CSS API.

    Returns:
        Font file URL, or None if the stylesheet has none.
    """
    for pattern in (_SRC_URL, _ANY_TTF_URL):
        match = pattern.search(css_content)
        if match:
            return match.group(1)
    return None


def _download_font(family: str, weight: int) -> Optional[bytes]:
    css_response = requests.get(
        CSS_URL,
        params={"family": f"{family}:{weight}", "display": "swap"},
        timeout=CSS_TIMEOUT,
    )
    css_response.raise_for_status()

    font_url = extract_font_url_from_css(css_response.text)
    if font_url is None:
        logger.error(f"No TTF source in Google Fonts CSS for {family} (weight {weight})")
        return None

    font_response = requests.get(font_url, timeout=FONT_TIMEOUT)
    font_response.raise_for_status()
    return font_response.content


def get_google_font(family: str, weight: int = 400, cache_dir: Path | None = None) -> Optional[Path]:
    """
    Get a Google Font as a local TTF file, downloading it on first use.

    Args:
        family: Font family name (e.g., "Anton", "Roboto Mono").
        weight: Font weight (e.g., 400 for regular, 700 for bold).
        cache_dir: Override for the cache directory.

    Returns:
        Path to the cached TTF file, or None if it couldn't be downloaded or cached.
    """
    cache_path = font_cache_path(family, weight, cache_dir)
    if cache_path.exists():
        logger.debug(f"Using cached Google Font: {cache_path.name}")
        return cache_path

    logger.info(f"Downloading Google Font: {family} (weight {weight})")
    try:
        data = _download_font(family, weight)
    except requests.RequestException as e:
        logger.error(f"Failed to download Google Font {family} (weight {weight}): {e}")
        return None
    if data is None:
        return None

    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_bytes(data)
    except OSError as e:
        logger.error(f"Failed to cache Google Font {family} to {cache_path}: {e}")
        return None

    logger.info(f"Downloaded and cached Google Font: {cache_path.name}")
    return cache_path
