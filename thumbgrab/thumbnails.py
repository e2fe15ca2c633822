"""YouTube thumbnail URLs follow a predictable pattern per quality tier."""

from thumbgrab.labels import DEFAULT_LANGUAGE, get_labels
from thumbgrab.models import ThumbnailCandidate

YOUTUBE_THUMBNAIL_BASE = "https://img.youtube.com/vi"

# Best first. Not every video has a maxres image, so callers fall back
# down the list when one fails to load.
YOUTUBE_TIERS = (
    ("maxresdefault.jpg", "max_quality"),
    ("hqdefault.jpg", "high_quality"),
    ("mqdefault.jpg", "medium_quality"),
)


def get_thumbnail_url(video_id: str, filename: str = "maxresdefault.jpg") -> str:
    return f"{YOUTUBE_THUMBNAIL_BASE}/{video_id}/{filename}"


def build_youtube_candidates(video_id: str, language: str = DEFAULT_LANGUAGE) -> tuple:
    """Build the ordered candidate list for a YouTube video ID.

    Pure: the URLs are not checked for existence.
    """
    labels = get_labels(language)
    return tuple(
        ThumbnailCandidate(url=get_thumbnail_url(video_id, filename), label=labels[label_key])
        for filename, label_key in YOUTUBE_TIERS
    )
