#!/usr/bin/env python3
"""
ThumbGrab - Video Thumbnail Finder
Finds downloadable thumbnails for YouTube and Rumble links.

Usage:
    python main.py "https://www.youtube.com/watch?v=VIDEO_ID"
    python main.py "https://rumble.com/v4abcd-title.html" --save ~/Pictures
    python main.py --history
"""

import argparse
import json
import sys
import warnings
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from thumbgrab.image_downloader import save_best_thumbnail
from thumbgrab.labels import SUPPORTED_LANGUAGES
from thumbgrab.session import SessionState

# Load environment variables from .env file
load_dotenv()

# Suppress SSL warnings
warnings.filterwarnings('ignore', message='urllib3 v2 only supports OpenSSL 1.1.1+')


def print_metadata(metadata):
    print(f"{metadata.title} [{metadata.platform.value}] id={metadata.id}")
    for i, candidate in enumerate(metadata.thumbnails, 1):
        print(f"  {i}. {candidate.label}: {candidate.url}")


def print_history(session, as_json=False):
    if as_json:
        print(session.history.to_json())
        return

    if not len(session.history):
        print("History is empty.")
        return

    for entry in session.history:
        when = datetime.fromtimestamp(entry.timestamp / 1000).strftime("%Y-%m-%d %H:%M")
        meta = entry.metadata
        print(f"{when}  [{meta.platform.value}] {meta.title}  {meta.original_url}")


def run_resolve(session, url, as_json=False, save_dir=None):
    """Resolve one link and print the result. Returns the exit code."""
    metadata, error = session.resolve_and_record(url)

    if as_json:
        output = {
            'success': metadata is not None,
            'error': None if error is None or error.is_silent else error.to_dict(session.language),
            'metadata': metadata.to_dict() if metadata else None,
            'saved_to': None,
        }
        if metadata and save_dir:
            saved = save_best_thumbnail(metadata, save_dir)
            output['saved_to'] = str(saved) if saved else None
        print(json.dumps(output, ensure_ascii=False))
        return 0 if error is None or error.is_silent else 1

    if error is not None:
        if error.is_silent:
            return 0
        print(f"Error: {error.user_message(session.language)}", file=sys.stderr)
        if error.detail:
            print(f"  -> {error.detail}", file=sys.stderr)
        return 1

    print_metadata(metadata)

    if save_dir:
        saved = save_best_thumbnail(metadata, save_dir)
        if saved:
            print(f"SAVED: {saved}")

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find downloadable thumbnails for YouTube and Rumble videos.")
    parser.add_argument('url', nargs='?', help='YouTube or Rumble video link')
    parser.add_argument('--json', action='store_true', help='Output JSON instead of formatted text')
    parser.add_argument('--save', type=Path, metavar='DIR', help='Download the best available thumbnail to DIR')
    parser.add_argument('--lang', choices=SUPPORTED_LANGUAGES, help='Language for labels and messages (saved)')
    parser.add_argument('--store', type=Path, help='Session store file (default: $THUMBGRAB_STORE)')
    parser.add_argument('--history', action='store_true', help='List recently resolved links')
    parser.add_argument('--clear-history', action='store_true', help='Forget all recently resolved links')
    args = parser.parse_args(argv)

    session = SessionState.load(args.store)

    if args.lang:
        session.set_language(args.lang)

    if args.clear_history:
        session.history.clear()
        print("History cleared.")
        return 0

    if args.history:
        print_history(session, as_json=args.json)
        return 0

    if args.url is None:
        parser.error("a URL is required unless --history or --clear-history is given")

    return run_resolve(session, args.url, as_json=args.json, save_dir=args.save)


if __name__ == "__main__":
    sys.exit(main())
