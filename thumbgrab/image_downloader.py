"""Save thumbnail images to disk."""

import re
import sys
import webbrowser
from pathlib import Path
from typing import Optional

import requests


def download_image(url: str, target_path: Path) -> Optional[Path]:
    """Download an image from a URL and save it locally.

    The image is streamed into a .part file next to target_path and only
    moved into place once complete. A failed download never touches an
    existing file at target_path.

    Args:
        url: Image URL to download
        target_path: Local path to save the image

    Returns:
        Path to saved image, or None on failure
    """
    part_path = target_path.with_name(target_path.name + ".part")
    try:
        response = requests.get(url, timeout=15, stream=True, headers={
            "User-Agent": "Mozilla/5.0 (compatible; ThumbGrab/1.0)"
        })
        response.raise_for_status()

        # Verify it's actually an image
        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("image/"):
            print(f"  -> Not an image: {content_type}", file=sys.stderr)
            return None

        target_path.parent.mkdir(parents=True, exist_ok=True)

        with open(part_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)

        part_path.replace(target_path)
        return target_path

    except (requests.exceptions.RequestException, OSError) as e:
        print(f"  -> Image download failed: {e}", file=sys.stderr)
        # Clean up partial download
        if part_path.exists():
            part_path.unlink()
        return None


def safe_file_stem(name: str) -> str:
    """Make a filesystem-safe file name from a video ID or title."""
    stem = re.sub(r'[^\w.-]+', '_', name).strip('._')
    return stem or "thumbnail"


def save_best_thumbnail(metadata, target_dir: Path, opener=webbrowser.open) -> Optional[Path]:
    """Save the first candidate that downloads as <id>.jpg in target_dir.

    Candidates are tried best-first. If none can be downloaded the
    preferred URL is opened with opener instead, so the user can still
    save it by hand.

    Returns:
        Path to saved image, or None when it fell back to opening the URL
    """
    stem = safe_file_stem(metadata.id)
    for candidate in metadata.thumbnails:
        saved = download_image(candidate.url, Path(target_dir) / f"{stem}.jpg")
        if saved is not None:
            return saved

    preferred = metadata.thumbnails[0]
    print(f"No thumbnail could be downloaded, opening {preferred.url} instead", file=sys.stderr)
    opener(preferred.url)
    return None
