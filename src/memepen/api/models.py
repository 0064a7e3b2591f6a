"""Data models for created memes."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone


@dataclass
class MemeImage:
    """Public location and size of a rendered meme."""

    path: str  # public URL
    width: int
    height: int


@dataclass
class Meme:
    """Represents a meme that was rendered and uploaded."""

    id: str
    image: MemeImage
    text: list[str]
    template_id: str
    user_id: str | None = None
    nsfw: bool = False
    created_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """
        Convert to a JSON-friendly dict.

        Returns:
            Dict with created_on as an ISO 8601 string.
        """
        data = asdict(self)
        data["created_on"] = self.created_on.isoformat()
        return data
