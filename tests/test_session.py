"""Tests for session state"""

from unittest.mock import Mock

import pytest

from thumbgrab.errors import ErrorKind, ResolutionError
from thumbgrab.session import SessionState
from thumbgrab.store import MemoryStore

YOUTUBE_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
RUMBLE_URL = "https://rumble.com/v4abcd-my-great-video.html"


class TestPreferences:
    def test_consent_defaults_to_false(self):
        assert SessionState(MemoryStore()).cookie_consent is False

    def test_accept_cookies_persists(self):
        store = MemoryStore()
        SessionState(store).accept_cookies()
        assert store.get("cookie_consent") == "true"
        assert SessionState(store).cookie_consent is True

    def test_language_defaults_to_english(self):
        assert SessionState(MemoryStore()).language == "en"

    def test_set_language(self):
        session = SessionState(MemoryStore())
        session.set_language("pt")
        assert session.language == "pt"

    def test_rejects_unknown_language(self):
        with pytest.raises(ValueError):
            SessionState(MemoryStore()).set_language("klingon")

    def test_unknown_stored_language_falls_back(self):
        assert SessionState(MemoryStore({"language": "xx"})).language == "en"


class TestApiReady:
    @pytest.mark.parametrize("key,ready", [
        ("abc123", True),
        (None, False),
        ("", False),
        ("   ", False),
        ("undefined", False),
    ])
    def test_api_ready(self, key, ready):
        assert SessionState(MemoryStore(), api_key=key).api_ready is ready


class TestLoad:
    def test_reads_credential_and_store_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        session = SessionState.load(tmp_path / "session.json")

        assert session.api_key == "env-key"
        session.accept_cookies()
        assert (tmp_path / "session.json").exists()

    def test_legacy_api_key_name(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("API_KEY", "legacy-key")
        assert SessionState.load(tmp_path / "session.json").api_key == "legacy-key"

    def test_store_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "from-env.json"
        monkeypatch.setenv("THUMBGRAB_STORE", str(path))
        SessionState.load().set_language("pt")
        assert path.exists()

    def test_corrupt_store_loads_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("not json", encoding="utf-8")
        session = SessionState.load(path, api_key=None)

        assert len(session.history) == 0
        assert session.cookie_consent is False
        assert session.language == "en"


class TestResolveAndRecord:
    def test_success_is_recorded(self):
        session = SessionState(MemoryStore())
        metadata, error = session.resolve_and_record(YOUTUBE_URL)

        assert error is None
        assert session.history.entries[0].metadata == metadata

    def test_failure_is_not_recorded(self):
        session = SessionState(MemoryStore())
        _, error = session.resolve_and_record("https://example.com/video")

        assert error.kind == ErrorKind.UNRECOGNIZED_LINK
        assert len(session.history) == 0

    def test_rumble_without_credential(self):
        session = SessionState(MemoryStore(), api_key="undefined")
        _, error = session.resolve_and_record(RUMBLE_URL)
        assert error.kind == ErrorKind.CREDENTIAL_MISSING

    def test_passes_credential_and_language(self):
        resolver = Mock(return_value=(None, ResolutionError(ErrorKind.INFERENCE_INCOMPLETE)))
        session = SessionState(MemoryStore({"language": "pt"}), api_key="key", resolver=resolver)

        session.resolve_and_record(RUMBLE_URL)

        resolver.assert_called_once_with(RUMBLE_URL, api_key="key", language="pt")

    def test_repeat_resolution_keeps_one_entry(self):
        session = SessionState(MemoryStore())
        session.resolve_and_record(YOUTUBE_URL)
        session.resolve_and_record("https://youtu.be/aaaaaaaaaaa")
        session.resolve_and_record(YOUTUBE_URL)

        urls = [e.metadata.original_url for e in session.history]
        assert urls == [YOUTUBE_URL, "https://youtu.be/aaaaaaaaaaa"]
