"""Built-in template definitions."""

from memepen.design.templates.default import (
    DEFAULT_IMAGE_PATHS,
    DEFAULT_TEMPLATES,
    TWO_BUTTONS,
    YALL_GOT_ANY_MORE_OF_THEM,
)

__all__ = ["DEFAULT_IMAGE_PATHS", "DEFAULT_TEMPLATES", "TWO_BUTTONS", "YALL_GOT_ANY_MORE_OF_THEM"]
