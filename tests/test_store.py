"""Tests for key-value stores"""

import json

from thumbgrab.store import JsonFileStore, MemoryStore


class TestMemoryStore:
    def test_set_get_remove(self):
        store = MemoryStore()
        store.set("a", "1")
        assert store.get("a") == "1"
        store.remove("a")
        assert store.get("a") is None

    def test_remove_missing_key_is_noop(self):
        MemoryStore().remove("missing")


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "session.json").get("thumb_history") is None

    def test_set_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "session.json"
        JsonFileStore(path).set("language", "pt")

        assert json.loads(path.read_text(encoding="utf-8")) == {"language": "pt"}

    def test_values_survive_new_instance(self, tmp_path):
        path = tmp_path / "session.json"
        JsonFileStore(path).set("cookie_consent", "true")
        assert JsonFileStore(path).get("cookie_consent") == "true"

    def test_set_keeps_other_keys(self, tmp_path):
        store = JsonFileStore(tmp_path / "session.json")
        store.set("a", "1")
        store.set("b", "2")
        assert store.get("a") == "1"
        assert store.get("b") == "2"

    def test_remove(self, tmp_path):
        store = JsonFileStore(tmp_path / "session.json")
        store.set("a", "1")
        store.remove("a")
        assert store.get("a") is None

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{oops", encoding="utf-8")
        assert JsonFileStore(path).get("a") is None

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonFileStore(path).get("a") is None

    def test_corrupt_file_is_replaced_on_write(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{oops", encoding="utf-8")
        store = JsonFileStore(path)
        store.set("a", "1")
        assert store.get("a") == "1"
