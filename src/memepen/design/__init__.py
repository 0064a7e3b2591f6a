"""Template layouts and text compositing."""

from memepen.design.compositor import LINE_SPACING, TextCompositor, draw_wrapped
from memepen.design.template import (
    Font,
    InMemoryTemplateRepository,
    Rotation,
    Stroke,
    Template,
    TemplateImage,
    TextStyle,
    load_templates,
)
from memepen.design.templates import DEFAULT_TEMPLATES

__all__ = [
    "DEFAULT_TEMPLATES",
    "Font",
    "InMemoryTemplateRepository",
    "LINE_SPACING",
    "Rotation",
    "Stroke",
    "Template",
    "TemplateImage",
    "TextCompositor",
    "TextStyle",
    "draw_wrapped",
    "load_templates",
]
