"""Turn a raw link into VideoMetadata.

classify -> branch by platform -> resolve -> package. The only I/O is the
Gemini call on the Rumble branch. Recording the result in history is the
caller's job.
"""

from thumbgrab.errors import ErrorKind, ResolutionError
from thumbgrab.gemini_resolver import resolve_rumble
from thumbgrab.labels import DEFAULT_LANGUAGE, get_labels
from thumbgrab.models import Platform, VideoMetadata
from thumbgrab.platforms import classify, extract_youtube_id
from thumbgrab.thumbnails import build_youtube_candidates


def resolve_youtube(url: str, language: str = DEFAULT_LANGUAGE):
    video_id = extract_youtube_id(url)
    if not video_id:
        return None, ResolutionError(ErrorKind.IDENTIFIER_NOT_FOUND, f"No video ID in {url}")

    metadata = VideoMetadata(
        id=video_id,
        title=get_labels(language)["youtube_title"],
        platform=Platform.YOUTUBE,
        original_url=url,
        thumbnails=build_youtube_candidates(video_id, language),
    )
    return metadata, None


def resolve(raw_url: str, api_key: str = None, language: str = DEFAULT_LANGUAGE,
            rumble_resolver=resolve_rumble):
    """Resolve a user-supplied link.

    Args:
        raw_url: Link as typed by the user; surrounding whitespace is ignored
        api_key: Gemini credential, required only for Rumble links
        language: Wording for labels and placeholder titles
        rumble_resolver: Callable used for Rumble links

    Returns:
        (VideoMetadata, None) on success, (None, ResolutionError) on failure.
        Errors from rumble_resolver are passed through unchanged.
    """
    url = (raw_url or "").strip()
    if not url:
        return None, ResolutionError(ErrorKind.EMPTY_INPUT)

    platform = classify(url)

    if platform is Platform.YOUTUBE:
        return resolve_youtube(url, language)

    if platform is Platform.RUMBLE:
        if not api_key:
            return None, ResolutionError(ErrorKind.CREDENTIAL_MISSING, "GEMINI_API_KEY is not set")
        return rumble_resolver(url, api_key, language=language)

    return None, ResolutionError(ErrorKind.UNRECOGNIZED_LINK, f"Unsupported link: {url}")
