"""
Custom exceptions for memepen.

Every error raised while composing or publishing a meme derives from
MemepenError and carries the key that caused it, so callers can build a
user-facing message without parsing strings.
"""


class MemepenError(Exception):
    """Base exception for all memepen-specific errors."""

    pass


class TemplateNotFound(MemepenError):
    """Raised when a template identifier is unknown."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id!r}")


class FontNotFound(MemepenError):
    """Raised when a font family cannot be resolved."""

    def __init__(self, family: str, field_index: int | None = None) -> None:
        self.family = family
        self.field_index = field_index
        message = f"Font not found: {family!r}"
        if field_index is not None:
            message += f" (text field {field_index})"
        super().__init__(message)


class ImageNotFound(MemepenError):
    """Raised when a background image cannot be loaded."""

    def __init__(self, image_id: str, reason: str | None = None) -> None:
        self.image_id = image_id
        self.reason = reason
        message = f"Image not found: {image_id!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TextCountMismatch(MemepenError):
    """Raised when the number of text strings differs from the template's field count."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Template has {expected} text field(s) but {actual} string(s) were supplied"
        )


class UploadFailure(MemepenError):
    """Raised when an uploader cannot store a rendered image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Upload to {path!r} failed: {reason}")


class MemeNotFound(MemepenError):
    """Raised when a stored meme record is unknown."""

    def __init__(self, meme_id: str) -> None:
        self.meme_id = meme_id
        super().__init__(f"Meme not found: {meme_id!r}")
