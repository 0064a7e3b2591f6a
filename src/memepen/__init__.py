"""Meme generator: composites text fields onto template images."""

__version__ = "0.1.0"

# High-level Python API
from memepen.api import Meme, MemeService, build_service
from memepen.config import Config, load_config
from memepen.design import DEFAULT_TEMPLATES, Template, TextCompositor, TextStyle
from memepen.exceptions import (
    FontNotFound,
    ImageNotFound,
    MemepenError,
    TemplateNotFound,
    TextCountMismatch,
    UploadFailure,
)
from memepen.fonts import FontResource, LocalFontRepository
from memepen.render import Canvas, LocalImageRepository

__all__ = [
    "Canvas",
    "Config",
    "DEFAULT_TEMPLATES",
    "FontNotFound",
    "FontResource",
    "ImageNotFound",
    "LocalFontRepository",
    "LocalImageRepository",
    "Meme",
    "MemeService",
    "MemepenError",
    "Template",
    "TemplateNotFound",
    "TextCompositor",
    "TextCountMismatch",
    "TextStyle",
    "UploadFailure",
    "build_service",
    "load_config",
]
