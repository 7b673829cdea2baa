import json

import pytest

from splash_cli.settings_store import SettingsStore, default_settings


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "splash-cli.json")


def test_default_download_dir():
    assert default_settings()["download_dir"] == "~/Pictures/splash_photos"


def test_default_settings_are_independent_copies():
    first = default_settings()
    first["auth"]["access_token"] = "token"
    assert default_settings()["auth"]["access_token"] == ""


def test_get_falls_back_to_defaults(store):
    assert store.get_int("update.last_update") == -1
    assert store.get_bool("auto_like_photos") is False


def test_set_then_get_round_trip(store):
    store.set("auth.access_token", "token")
    assert store.get_string("auth.access_token") == "token"
    assert store.get_string("auth.refresh_token") == ""


def test_nested_mapping_merges_defaults(store):
    store.set("auth.access_token", "token")
    auth = store.get("auth")
    assert auth["access_token"] == "token"
    assert auth["refresh_token"] == ""


def test_keys_are_case_insensitive(store):
    store.set("Download_Dir", "/photos")
    assert store.get_string("download_dir") == "/photos"


def test_missing_key_returns_given_default(store):
    assert store.get("no.such.key", "fallback") == "fallback"
    assert store.get_string("no.such.key") == ""
    assert store.get_int("no.such.key") == 0


def test_write_and_read_round_trip(store):
    store.set("auth.access_token", "token")
    store.write()

    fresh = SettingsStore(store.path)
    fresh.read()
    assert fresh.get_string("auth.access_token") == "token"
    assert fresh.get("download_dir") == default_settings()["download_dir"]


def test_written_file_holds_defaults(store):
    store.write()
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data == default_settings()


def test_read_missing_file_raises(store):
    with pytest.raises(FileNotFoundError):
        store.read()


def test_safe_write_refuses_existing_file(store):
    store.safe_write()
    assert store.path.exists()
    with pytest.raises(FileExistsError):
        store.safe_write()


def test_conversions(store):
    store.set("flag", "true")
    store.set("count", "42")
    store.set("number", 7)
    assert store.get_bool("flag") is True
    assert store.get_int("count") == 42
    assert store.get_string("number") == str(7)


def test_get_string_map_returns_copy(store):
    store.set("aliases", {"nature": "123"})
    aliases = store.get_string_map("aliases")
    aliases["other"] = "456"
    assert store.get_string_map("aliases") == {"nature": "123"}


def test_get_string_map_of_non_mapping(store):
    assert store.get_string_map("download_dir") == {}