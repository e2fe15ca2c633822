"""Data model for resolved videos, thumbnail candidates and history entries."""

from dataclasses import dataclass
from enum import Enum


def require_str(data: dict, key: str) -> str:
    """Read a required string field; null or other types are rejected."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


class Platform(Enum):
    YOUTUBE = "YouTube"
    RUMBLE = "Rumble"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ThumbnailCandidate:
    """One proposed thumbnail URL with a human-readable quality label."""
    url: str
    label: str

    def to_dict(self) -> dict:
        return {"url": self.url, "label": self.label}

    @classmethod
    def from_dict(cls, data: dict) -> "ThumbnailCandidate":
        return cls(url=require_str(data, "url"), label=require_str(data, "label"))


@dataclass(frozen=True)
class VideoMetadata:
    """Result of one successful resolution.

    thumbnails is ordered best-first; callers use it as a fallback chain
    when the preferred image fails to load.
    """
    id: str
    title: str
    platform: Platform
    original_url: str
    thumbnails: tuple

    def __post_init__(self):
        if not self.thumbnails:
            raise ValueError("VideoMetadata requires at least one thumbnail")
        # Accept lists from callers but store an immutable sequence
        object.__setattr__(self, "thumbnails", tuple(self.thumbnails))

    def to_dict(self) -> dict:
        """Serialize using the camelCase keys of the persisted history format."""
        return {
            "id": self.id,
            "title": self.title,
            "platform": self.platform.value,
            "originalUrl": self.original_url,
            "thumbnails": [t.to_dict() for t in self.thumbnails],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "VideoMetadata":
        """Inverse of to_dict.

        Raises:
            KeyError: If a required field is missing
            ValueError: If platform is unknown or thumbnails is empty
            TypeError: If a text field is not a string or thumbnails is not
                a list of objects
        """
        return cls(
            id=require_str(data, "id"),
            title=require_str(data, "title"),
            platform=Platform(data["platform"]),
            original_url=require_str(data, "originalUrl"),
            thumbnails=tuple(ThumbnailCandidate.from_dict(t) for t in data["thumbnails"]),
        )


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: int  # epoch millis
    metadata: VideoMetadata

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "metadata": self.metadata.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        timestamp = data["timestamp"]
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise TypeError(f"timestamp must be a number, got {type(timestamp).__name__}")
        return cls(timestamp=int(timestamp), metadata=VideoMetadata.from_dict(data["metadata"]))
