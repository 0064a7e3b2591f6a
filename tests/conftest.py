"""
Pytest configuration and shared fixtures for memepen tests.

Fonts come from Pillow's bundled default FreeType font so the tests don't
depend on fonts installed on the machine.
"""

import pytest
from PIL import Image, ImageFont

from memepen.api.builder import MemeService
from memepen.design.compositor import TextCompositor
from memepen.design.template import InMemoryTemplateRepository
from memepen.design.templates import DEFAULT_TEMPLATES
from memepen.fonts import FontResource, InMemoryFontRepository
from memepen.render.image import InMemoryImageRepository
from memepen.storage import InMemoryMemeRepository, NoopUploader

# Background color that never occurs in white or black text or their blends
BACKGROUND_COLOR = (0, 128, 255)


class BundledFontResource(FontResource):
    """FontResource that renders with Pillow's built-in font."""

    def face(self, size: float) -> ImageFont.FreeTypeFont:
        return ImageFont.load_default(size=size)


@pytest.fixture
def font_repository():
    """Provide Impact and Arial, both backed by the bundled font."""
    return InMemoryFontRepository(
        [BundledFontResource(family="Impact", data=b""), BundledFontResource(family="Arial", data=b"")]
    )


@pytest.fixture
def image_repository():
    """Provide solid backgrounds for the built-in templates."""
    return InMemoryImageRepository(
        {
            "yall-got-any-more-of-them": Image.new("RGB", (600, 471), BACKGROUND_COLOR),
            "two-buttons": Image.new("RGB", (500, 756), BACKGROUND_COLOR),
            "plain": Image.new("RGB", (600, 471), BACKGROUND_COLOR),
        }
    )


@pytest.fixture
def template_repository():
    return InMemoryTemplateRepository(DEFAULT_TEMPLATES)


@pytest.fixture
def compositor(font_repository, image_repository):
    return TextCompositor(font_repository, image_repository)


@pytest.fixture
def meme_repository():
    return InMemoryMemeRepository()


@pytest.fixture
def service(font_repository, image_repository, meme_repository, template_repository):
    """Provide a MemeService that renders in memory and discards uploads."""
    return MemeService(
        fonts=font_repository,
        images=image_repository,
        memes=meme_repository,
        templates=template_repository,
        uploader=NoopUploader(),
        public_base_url="http://memes.test",
    )
