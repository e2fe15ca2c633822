"""Per-user session state: store, history, credential and preferences.

Load once at startup with SessionState.load(); every mutation is written
back to the store immediately.
"""

import os
from pathlib import Path

from thumbgrab.history import HISTORY_LIMIT, History
from thumbgrab.labels import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from thumbgrab.resolver import resolve
from thumbgrab.store import JsonFileStore

DEFAULT_STORE_PATH = Path.home() / ".thumbgrab" / "session.json"
CONSENT_KEY = "cookie_consent"
LANGUAGE_KEY = "language"


def read_api_key() -> str:
    """Gemini credential from the environment. API_KEY is the legacy name."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")


class SessionState:
    def __init__(self, store, api_key: str = None, history_limit: int = HISTORY_LIMIT,
                 resolver=resolve):
        self.store = store
        self.api_key = api_key
        self.history = History(store, limit=history_limit)
        self._resolver = resolver

    @classmethod
    def load(cls, store_path: Path = None, **kwargs) -> "SessionState":
        """Build a session from THUMBGRAB_STORE and the environment credential."""
        if store_path is None:
            store_path = Path(os.getenv("THUMBGRAB_STORE", DEFAULT_STORE_PATH)).expanduser()
        kwargs.setdefault("api_key", read_api_key())
        return cls(JsonFileStore(store_path), **kwargs)

    @property
    def api_ready(self) -> bool:
        key = (self.api_key or "").strip()
        return bool(key) and key != "undefined"

    @property
    def cookie_consent(self) -> bool:
        return self.store.get(CONSENT_KEY) == "true"

    def accept_cookies(self) -> None:
        self.store.set(CONSENT_KEY, "true")

    @property
    def language(self) -> str:
        code = self.store.get(LANGUAGE_KEY)
        return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE

    def set_language(self, code: str) -> None:
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language {code!r}, expected one of {', '.join(SUPPORTED_LANGUAGES)}")
        self.store.set(LANGUAGE_KEY, code)

    def resolve_and_record(self, raw_url: str):
        """Resolve a link and add successes to history.

        Returns:
            (VideoMetadata, None) or (None, ResolutionError)
        """
        api_key = self.api_key if self.api_ready else None
        metadata, error = self._resolver(raw_url, api_key=api_key, language=self.language)
        if metadata is not None:
            self.history.add(metadata)
        return metadata, error
