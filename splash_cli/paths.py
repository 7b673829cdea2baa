"""Home-directory path helpers and file downloads."""

from __future__ import annotations

import re
import shutil
import urllib.request
from pathlib import Path

_LEADING_TILDE = re.compile(r"^~?")


def _home(home: str | None) -> str:
    return str(Path.home()) if home is None else home


def home_path(path: str, home: str | None = None) -> str:
    """Put the home directory before ``path`` unless it is absolute, dropping a leading "~"."""
    if path.startswith("/"):
        return path
    path = _LEADING_TILDE.sub("", path, count=1)
    return f"{_home(home)}/{path}"


def insert_home_if_needed(path: str, home: str | None = None) -> str:
    """Replace a leading "~" with the home directory; other non-empty paths are unchanged."""
    if path and not path.startswith("~"):
        return path
    directory = _home(home)
    return _LEADING_TILDE.sub(lambda _match: directory, path, count=1)


def file_exists(filename: str) -> bool:
    """True if ``filename`` can be stat'ed."""
    try:
        Path(filename).stat()
    except OSError:
        return False
    return True


def download_file(url: str, filename: str) -> str:
    """Download ``url`` into ``filename`` (a leading "~" is expanded) and return ``filename``."""
    path = insert_home_if_needed(filename)
    with open(path, "wb") as out:
        with urllib.request.urlopen(url) as response:
            shutil.copyfileobj(response, out)
    return filename