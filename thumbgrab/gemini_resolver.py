"""Rumble thumbnail lookup through Gemini with Google Search grounding.

Rumble thumbnail URLs cannot be derived from the video ID, so the model is
asked to find them on the public page and answer with a small JSON object.
"""

import json
import os
import sys
from typing import Optional
from urllib.parse import urlparse

import requests

from prompts.thumbnail_lookup import SYSTEM_PROMPT, build_user_prompt
from thumbgrab.errors import ErrorKind, ResolutionError
from thumbgrab.labels import DEFAULT_LANGUAGE, get_labels
from thumbgrab.models import Platform, ThumbnailCandidate, VideoMetadata

# Configuration
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
GEMINI_TIMEOUT = 60  # seconds
RUMBLE_PLACEHOLDER_ID = "rumble-vid"


def derive_rumble_id(url: str) -> str:
    """Take the last path segment of a Rumble link, without its title slug.

    https://rumble.com/v4abcd-my-video.html -> v4abcd
    """
    parsed = urlparse(url.strip() if "://" in url else f"https://{url.strip()}")
    segments = [s for s in parsed.path.split("/") if s]
    if not segments:
        return RUMBLE_PLACEHOLDER_ID

    video_id = segments[-1].split("-")[0]
    if video_id.endswith(".html"):
        video_id = video_id[:-len(".html")]
    return video_id or RUMBLE_PLACEHOLDER_ID


def build_request_body(url: str) -> dict:
    return {
        "system_instruction": {"parts": [{"text": SYSTEM_PROMPT}]},
        "contents": [{"role": "user", "parts": [{"text": build_user_prompt(url)}]}],
        "tools": [{"google_search": {}}],
        "generationConfig": {"responseMimeType": "application/json"},
    }


def extract_response_text(envelope: dict) -> Optional[str]:
    """Join the text parts of the first candidate, or None if there are none."""
    candidates = envelope.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return None
    parts = (candidates[0].get("content") or {}).get("parts") or []
    texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    return "".join(texts) if texts else None


def call_gemini(url: str, api_key: str, model: str = GEMINI_MODEL, timeout: int = GEMINI_TIMEOUT):
    """Send one generateContent request and return the raw answer text.

    Returns:
        (text, None) on success, (None, ResolutionError) on transport failure
    """
    endpoint = f"{GEMINI_API_BASE}/models/{model}:generateContent"

    try:
        response = requests.post(
            endpoint,
            headers={"x-goog-api-key": api_key, "Content-Type": "application/json"},
            json=build_request_body(url),
            timeout=timeout,
        )
        response.raise_for_status()
        envelope = response.json()

    except requests.exceptions.ConnectionError:
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, "Cannot connect to Gemini API")
    except requests.exceptions.Timeout:
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, f"Gemini request timed out ({timeout}s)")
    except requests.exceptions.HTTPError as e:
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, f"Gemini API error: {e}")
    except requests.exceptions.RequestException as e:
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, f"Gemini request failed: {e}")
    except ValueError as e:
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, f"Unreadable Gemini response: {e}")

    if not isinstance(envelope, dict):
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, "Unexpected Gemini response envelope")

    text = extract_response_text(envelope)
    if text is None:
        reason = (envelope.get("promptFeedback") or {}).get("blockReason", "no candidates")
        return None, ResolutionError(ErrorKind.INFERENCE_UNAVAILABLE, f"Gemini returned no answer: {reason}")

    return text, None


def parse_lookup_answer(text: str):
    """Validate the model's answer against {title?: str, thumbnailUrl: str}.

    Returns:
        ({"title": str | None, "thumbnailUrl": str}, None) or (None, ResolutionError)
    """
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        return None, ResolutionError(ErrorKind.INFERENCE_MALFORMED, f"Failed to parse Gemini answer as JSON: {e}")

    if not isinstance(data, dict):
        return None, ResolutionError(ErrorKind.INFERENCE_MALFORMED, "Gemini answer is not a JSON object")

    for field in ("title", "thumbnailUrl"):
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            return None, ResolutionError(
                ErrorKind.INFERENCE_MALFORMED, f"Field {field!r} must be a string, got {type(value).__name__}"
            )

    thumbnail_url = (data.get("thumbnailUrl") or "").strip()
    if not thumbnail_url:
        return None, ResolutionError(ErrorKind.INFERENCE_INCOMPLETE, "Gemini answer has no thumbnailUrl")

    title = (data.get("title") or "").strip() or None
    return {"title": title, "thumbnailUrl": thumbnail_url}, None


def resolve_rumble(url: str, api_key: str, language: str = DEFAULT_LANGUAGE,
                   model: str = GEMINI_MODEL, timeout: int = GEMINI_TIMEOUT):
    """Resolve a Rumble link with a single Gemini call. No retries.

    The caller must have checked that api_key is set.

    Returns:
        (VideoMetadata, None) or (None, ResolutionError)
    """
    text, error = call_gemini(url, api_key, model=model, timeout=timeout)
    if error is None:
        answer, error = parse_lookup_answer(text)

    if error is not None:
        print(f"Gemini lookup failed for {url}: {error.detail}", file=sys.stderr)
        return None, error

    labels = get_labels(language)
    metadata = VideoMetadata(
        id=derive_rumble_id(url),
        title=answer["title"] or labels["rumble_title"],
        platform=Platform.RUMBLE,
        original_url=url,
        thumbnails=(ThumbnailCandidate(url=answer["thumbnailUrl"], label=labels["original_resolution"]),),
    )
    return metadata, None
