import io
import json
import urllib.error

import pytest

from splash_cli.github import (
    LATEST_RELEASE_URL,
    ReleaseError,
    current_version,
    fetch_latest_version,
    needs_to_update,
)
from splash_cli.versions import Version


class FakeResponse:
    def __init__(self, status, body):
        self.status = status
        self.reason = ""
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def opener_returning(status, payload, seen=None):
    def opener(request):
        if seen is not None:
            seen.append(request)
        return FakeResponse(status, json.dumps(payload).encode("utf-8"))

    return opener


def test_fetch_latest_version_parses_tag():
    seen = []
    version = fetch_latest_version(opener_returning(200, {"tag_name": "4.1.2"}, seen))
    assert version == Version(4, 1, 2)
    assert seen[0].full_url == LATEST_RELEASE_URL
    assert seen[0].full_url.startswith("https://api.github.com/repos/")


def test_fetch_latest_version_error_status():
    with pytest.raises(ReleaseError, match="Something went wrong while fetching the latest release"):
        fetch_latest_version(opener_returning(404, {}))


def test_fetch_latest_version_http_error():
    def opener(request):
        raise urllib.error.HTTPError(request.full_url, 500, "boom", {}, io.BytesIO(b""))

    with pytest.raises(ReleaseError):
        fetch_latest_version(opener)


def test_fetch_latest_version_bad_tag():
    with pytest.raises(ValueError):
        fetch_latest_version(opener_returning(200, {"tag_name": "latest"}))


def test_current_version():
    assert current_version("dev") is None
    assert current_version("1.2.3") == Version(1, 2, 3)


def test_dev_build_always_updates():
    latest = Version(1, 0, 0)
    assert needs_to_update("dev", lambda: latest) == (True, latest)


def test_newer_release_needs_update():
    latest = Version(2, 0, 0)
    assert needs_to_update("1.0.0", lambda: latest) == (True, latest)


def test_older_release_does_not_need_update():
    latest = Version(1, 0, 0)
    assert needs_to_update("2.0.0", lambda: latest) == (False, latest)


def test_invalid_current_version():
    assert needs_to_update("not-a-version", lambda: Version(1, 0, 0)) == (False, None)


def test_fetch_failure():
    def failing():
        raise ReleaseError("down")

    assert needs_to_update("1.0.0", failing) == (False, None)