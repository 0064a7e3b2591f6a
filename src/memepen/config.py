"""Configuration loading and validation."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from memepen.design.templates import DEFAULT_IMAGE_PATHS
from memepen.fonts import DEFAULT_FONT_PATHS
from memepen.types import UploaderType

DEFAULT_CONFIG_NAME = "memepen.toml"


class ServerConfig(BaseModel):
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 8080

    public_base_url: str = "http://localhost:8080"
    """Prefix for the public URL of uploaded memes."""


class StorageConfig(BaseModel):
    """Where rendered memes are uploaded."""

    uploader: UploaderType = "local"
    """Uploader backend: "local" (filesystem), "noop" (discard) or "http" (PUT to a bucket URL)."""

    root: Path = Path(".")
    """Root directory for the local uploader."""

    url: str | None = None
    """Base URL for the http uploader, e.g. a bucket endpoint."""

    timeout: float = 30.0
    """Request timeout for the http uploader in seconds."""

    @model_validator(mode="after")
    def _check_url(self) -> "StorageConfig":
        if self.uploader == "http" and not self.url:
            raise ValueError("storage.url is required when storage.uploader is 'http'")
        return self


class FontsConfig(BaseModel):
    """Font lookup settings."""

    paths: dict[str, Path] = Field(default_factory=lambda: dict(DEFAULT_FONT_PATHS))
    """Explicit font family → file path table."""

    directories: list[Path] = Field(default_factory=list)
    """Directories scanned for .ttf/.otf files."""

    google_fallback: bool = False
    """Download unknown families from Google Fonts."""

    google_weight: int = 400
    """Font weight for Google Fonts downloads (100-900)."""


class ImagesConfig(BaseModel):
    """Background image lookup settings."""

    paths: dict[str, Path] = Field(default_factory=lambda: dict(DEFAULT_IMAGE_PATHS))
    """Image ID → file path table."""


class TemplatesConfig(BaseModel):
    """Template source settings."""

    file: Path | None = None
    """Optional TOML file with extra templates."""

    include_defaults: bool = True
    """Serve the built-in templates alongside the ones from file."""


class Config(BaseModel):
    """Root configuration. Every section has defaults."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    fonts: FontsConfig = Field(default_factory=FontsConfig)
    images: ImagesConfig = Field(default_factory=ImagesConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, looks for memepen.toml in the
                     current directory and falls back to defaults if it isn't there.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return Config()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            f"Copy {DEFAULT_CONFIG_NAME}.example to {DEFAULT_CONFIG_NAME} and adjust the paths."
        )

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    return Config(**config_dict)
