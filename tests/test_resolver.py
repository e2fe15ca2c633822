"""Tests for the resolution orchestrator"""

from unittest.mock import patch, Mock

from thumbgrab.errors import ErrorKind, ResolutionError
from thumbgrab.models import Platform, ThumbnailCandidate, VideoMetadata
from thumbgrab.resolver import resolve

RUMBLE_URL = "https://rumble.com/v4abcd-my-great-video.html"


class TestResolveYoutube:
    def test_watch_link(self):
        metadata, error = resolve("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

        assert error is None
        assert metadata.id == "dQw4w9WgXcQ"
        assert metadata.platform == Platform.YOUTUBE
        assert metadata.title == "YouTube Video"
        assert len(metadata.thumbnails) == 3
        assert all("dQw4w9WgXcQ" in t.url for t in metadata.thumbnails)

    def test_original_url_is_trimmed_input(self):
        metadata, _ = resolve("   https://youtu.be/dQw4w9WgXcQ \n")
        assert metadata.original_url == "https://youtu.be/dQw4w9WgXcQ"

    def test_generic_title_follows_language(self):
        metadata, _ = resolve("https://youtu.be/dQw4w9WgXcQ", language="pt")
        assert metadata.title == "Vídeo do YouTube"

    def test_youtube_link_without_id(self):
        metadata, error = resolve("https://www.youtube.com/@somecreator")
        assert metadata is None
        assert error.kind == ErrorKind.IDENTIFIER_NOT_FOUND


class TestResolveInputErrors:
    def test_empty_input(self):
        metadata, error = resolve("")
        assert metadata is None
        assert error.kind == ErrorKind.EMPTY_INPUT
        assert error.is_silent

    def test_whitespace_only_input(self):
        _, error = resolve("   \t ")
        assert error.kind == ErrorKind.EMPTY_INPUT

    def test_none_input(self):
        _, error = resolve(None)
        assert error.kind == ErrorKind.EMPTY_INPUT

    def test_unrecognized_link(self):
        metadata, error = resolve("https://example.com/video")
        assert metadata is None
        assert error.kind == ErrorKind.UNRECOGNIZED_LINK
        assert not error.is_silent
        assert error.user_message() == "Please enter a valid YouTube or Rumble link."


class TestResolveRumble:
    @patch("thumbgrab.gemini_resolver.requests.post")
    def test_missing_credential_makes_no_call(self, mock_post):
        metadata, error = resolve(RUMBLE_URL, api_key=None)

        assert metadata is None
        assert error.kind == ErrorKind.CREDENTIAL_MISSING
        mock_post.assert_not_called()

    def test_delegates_with_trimmed_url(self):
        expected = VideoMetadata(
            id="v4abcd", title="X", platform=Platform.RUMBLE, original_url=RUMBLE_URL,
            thumbnails=[ThumbnailCandidate("https://img/x.jpg", "Original Resolution")],
        )
        rumble_resolver = Mock(return_value=(expected, None))

        metadata, error = resolve(f"  {RUMBLE_URL}  ", api_key="key", rumble_resolver=rumble_resolver)

        assert error is None
        assert metadata is expected
        rumble_resolver.assert_called_once_with(RUMBLE_URL, "key", language="en")

    def test_passes_resolver_errors_through_unchanged(self):
        for kind in (ErrorKind.INFERENCE_UNAVAILABLE, ErrorKind.INFERENCE_MALFORMED, ErrorKind.INFERENCE_INCOMPLETE):
            failure = ResolutionError(kind, "upstream detail")
            rumble_resolver = Mock(return_value=(None, failure))

            metadata, error = resolve(RUMBLE_URL, api_key="key", rumble_resolver=rumble_resolver)

            assert metadata is None
            assert error is failure
