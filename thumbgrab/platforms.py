"""Platform detection and video ID extraction from raw links."""

import re
from typing import Optional

from thumbgrab.models import Platform

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")
RUMBLE_HOSTS = ("rumble.com",)

# Matches watch?v=, &v=, /embed/, /e/, /v/, /shorts/, /live/, /<a>/<b>/ and
# youtu.be/ shapes. The ID is always taken from one of those positions,
# never from an arbitrary 11-character run.
YOUTUBE_ID_PATTERN = re.compile(
    r'(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts|live)/|.*[?&]v=)|youtu\.be/)'
    r'([^"&?/\s]{11})',
    re.IGNORECASE,
)

# Rumble links look like https://rumble.com/v12345-some-title.html
RUMBLE_ID_PATTERN = re.compile(r'rumble\.com/v([a-z0-9]+)-', re.IGNORECASE)


def classify(url: str) -> Platform:
    """Detect which platform a link belongs to.

    Host matching is case-insensitive. An unrecognized link is a valid
    result (Platform.UNKNOWN), not an error.
    """
    candidate = url.strip().lower()
    if any(host in candidate for host in YOUTUBE_HOSTS):
        return Platform.YOUTUBE
    if any(host in candidate for host in RUMBLE_HOSTS):
        return Platform.RUMBLE
    return Platform.UNKNOWN


def extract_youtube_id(url: str) -> Optional[str]:
    """Return the 11-character video ID, or None if the link has none."""
    match = YOUTUBE_ID_PATTERN.search(url.strip())
    return match.group(1) if match else None


def extract_rumble_id(url: str) -> Optional[str]:
    """Return the token after rumble.com/v, or None.

    Not used for resolution: Rumble thumbnails cannot be built from it.
    """
    match = RUMBLE_ID_PATTERN.search(url.strip())
    return match.group(1) if match else None
