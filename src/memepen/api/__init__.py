"""Service layer and HTTP API."""

from memepen.api.builder import MemeService, build_service
from memepen.api.models import Meme, MemeImage

__all__ = [
    "Meme",
    "MemeImage",
    "MemeService",
    "build_service",
]
