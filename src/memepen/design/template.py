"""Template layout models and template lookup."""

import logging
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Annotated

from PIL import ImageColor
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from memepen.exceptions import TemplateNotFound
from memepen.types import HexColor

logger = logging.getLogger(__name__)


def _validate_color(value: str) -> str:
    # Pillow accepts "#RGB", "#RRGGBB", "#RRGGBBAA" and CSS names
    try:
        ImageColor.getrgb(value)
    except ValueError as e:
        raise ValueError(f"Invalid color {value!r}: {e}") from e
    return value


Color = Annotated[HexColor, AfterValidator(_validate_color)]


class Font(BaseModel):
    """Font used to draw one text field."""

    model_config = ConfigDict(frozen=True)

    family: str
    """Font family name, resolved through a font repository (e.g. "Impact")."""

    size: float = Field(gt=0)
    """Font size in points. Also drives the anchor offset per wrapped line."""

    color: Color = "#FFFFFF"
    """Fill color of the glyphs."""


class Stroke(BaseModel):
    """Outline drawn behind the text."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(ge=0)
    """Outline radius in pixels."""

    color: Color = "#000000"
    """Outline color."""


class Rotation(BaseModel):
    """Rotation applied to a text field about its anchor."""

    model_config = ConfigDict(frozen=True)

    degrees: float
    """Rotation angle in degrees. Positive values turn clockwise on screen."""


class TextStyle(BaseModel):
    """
    Placement and styling of one text field.

    The box origin (x, y) is the top-left corner of the field. The width is used
    both as the wrapping limit and for horizontal centering.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int = Field(gt=0)
    font: Font
    stroke: Stroke | None = None
    rotation: Rotation | None = None


class TemplateImage(BaseModel):
    """Background image reference of a template."""

    model_config = ConfigDict(frozen=True)

    id: str
    path: str | None = None
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class Template(BaseModel):
    """
    A meme template: background image plus ordered text fields.

    The order of text_styles matches the order of the strings passed to
    TextCompositor.compose().
    """

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    name: str
    image: TemplateImage
    text_styles: tuple[TextStyle, ...]

    @property
    def field_count(self) -> int:
        """Number of text fields the template expects."""
        return len(self.text_styles)


class InMemoryTemplateRepository:
    """Template lookup over a fixed set of templates."""

    def __init__(self, templates: Mapping[str, Template] | Iterable[Template]) -> None:
        """
        Initialize repository.

        Args:
            templates: Templates keyed by ID, or an iterable of templates (keyed by their own ID).
        """
        if isinstance(templates, Mapping):
            self._templates = dict(templates)
        else:
            self._templates = {template.id: template for template in templates}

    def get(self, template_id: str) -> Template:
        """
        Get a template by ID.

        Raises:
            TemplateNotFound: If no template has this ID.
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise TemplateNotFound(template_id) from None

    def list(self) -> list[Template]:
        """Return all templates in insertion order."""
        return list(self._templates.values())


def load_templates(path: Path) -> dict[str, Template]:
    """
    Load templates from a TOML file.

    Each ``[[templates]]`` table is validated into a Template:

        [[templates]]
        id = "drake"
        slug = "drake"
        name = "Drake Hotline Bling"
        image = { id = "drake", width = 1200, height = 1200 }

        [[templates.text_styles]]
        x = 620
        y = 40
        width = 560
        font = { family = "Impact", size = 60, color = "#FFFFFF" }
        stroke = { size = 4, color = "#000000" }

    Args:
        path: Path to the TOML file.

    Returns:
        Templates keyed by ID, in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If a template is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Templates file not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    templates = {}
    for entry in data.get("templates", []):
        template = Template.model_validate(entry)
        templates[template.id] = template

    logger.info(f"Loaded {len(templates)} template(s) from {path}")
    return templates
