"""High-level API for creating memes."""

import logging
import uuid
from collections.abc import Sequence

from PIL import Image

from memepen.api.models import Meme, MemeImage
from memepen.config import Config
from memepen.design.compositor import TextCompositor
from memepen.design.template import InMemoryTemplateRepository, Template, load_templates
from memepen.design.templates import DEFAULT_TEMPLATES
from memepen.fonts import FontRepository, GoogleFontRepository, LocalFontRepository
from memepen.render.image import ImageRepository, LocalImageRepository
from memepen.storage import InMemoryMemeRepository, Uploader, make_uploader

logger = logging.getLogger(__name__)

# Upload path prefix for rendered memes
MEMES_PREFIX = "memes"


class MemeService:
    """
    Creates memes from templates and publishes them.

    Collaborators are injected so the same service runs against local files,
    in-memory fixtures or remote storage.
    """

    def __init__(
        self,
        fonts: FontRepository,
        images: ImageRepository,
        memes: InMemoryMemeRepository,
        templates: InMemoryTemplateRepository,
        uploader: Uploader,
        public_base_url: str = "http://localhost:8080",
    ) -> None:
        """
        Initialize service.

        Args:
            fonts: Font repository.
            images: Background image repository.
            memes: Store for created meme records.
            templates: Template repository.
            uploader: Destination for rendered PNGs.
            public_base_url: URL prefix under which uploaded files are served.
        """
        self.compositor = TextCompositor(fonts, images)
        self.memes = memes
        self.templates = templates
        self.uploader = uploader
        self.public_base_url = public_base_url.rstrip("/")

    def create_meme(self, template: Template, text: Sequence[str]) -> Image.Image:
        """
        Render a meme without publishing it.

        Args:
            template: Template to render.
            text: One string per text field.

        Returns:
            Rendered image.
        """
        return self.compositor.compose(template, text)

    def create_meme_from_template_id(self, template_id: str, text: Sequence[str]) -> Image.Image:
        """
        Render a meme from a template ID.

        Raises:
            TemplateNotFound: If the template ID is unknown.
        """
        template = self.templates.get(template_id)
        return self.create_meme(template, text)

    def create_meme_and_upload(
        self, template: Template, text: Sequence[str], user_id: str | None = None
    ) -> Meme:
        """
        Render a meme, upload the PNG and record it.

        Args:
            template: Template to render.
            text: One string per text field.
            user_id: Optional ID of the creating user.

        Returns:
            The stored Meme record.

        Raises:
            UploadFailure: If the uploader rejects the image. Nothing is recorded.
        """
        img = self.create_meme(template, text)

        meme_id = str(uuid.uuid4())
        path = f"{MEMES_PREFIX}/{meme_id}"
        self.uploader.upload_png(path, img)

        meme = Meme(
            id=meme_id,
            image=MemeImage(
                path=f"{self.public_base_url}/{path}.png",
                width=img.width,
                height=img.height,
            ),
            text=list(text),
            template_id=template.id,
            user_id=user_id,
        )
        self.memes.create(meme)

        logger.info(f"Created meme {meme_id} from template {template.id}")
        return meme

    def create_meme_and_upload_from_template_id(
        self, template_id: str, text: Sequence[str], user_id: str | None = None
    ) -> Meme:
        """
        Render, upload and record a meme from a template ID.

        Raises:
            TemplateNotFound: If the template ID is unknown.
        """
        template = self.templates.get(template_id)
        return self.create_meme_and_upload(template, text, user_id=user_id)


def build_service(config: Config) -> MemeService:
    """
    Wire a MemeService from configuration.

    Args:
        config: Loaded configuration (from load_config()).

    Returns:
        MemeService backed by local fonts and images, optional Google Fonts
        fallback, and the configured uploader.
    """
    fonts: FontRepository = LocalFontRepository(
        paths=config.fonts.paths,
        directories=config.fonts.directories,
    )
    if config.fonts.google_fallback:
        fonts = GoogleFontRepository(fallback=fonts, weight=config.fonts.google_weight)

    templates: dict[str, Template] = {}
    if config.templates.include_defaults:
        templates.update(DEFAULT_TEMPLATES)
    if config.templates.file is not None:
        templates.update(load_templates(config.templates.file))

    logger.info(f"Serving {len(templates)} template(s) with {config.storage.uploader} uploader")

    return MemeService(
        fonts=fonts,
        images=LocalImageRepository(config.images.paths),
        memes=InMemoryMemeRepository(),
        templates=InMemoryTemplateRepository(templates),
        uploader=make_uploader(config.storage),
        public_base_url=config.server.public_base_url,
    )
