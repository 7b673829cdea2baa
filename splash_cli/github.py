"""Checking the project's releases for a newer version."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable
from typing import Any

from splash_cli.versions import Version, parse_version

REPOSITORY = "splash-cli/splash-cli"
LATEST_RELEASE_URL = f"https://api.github.com/repos/{REPOSITORY}/releases/latest"

logger = logging.getLogger(__name__)


class ReleaseError(Exception):
    """The latest release could not be fetched."""


def fetch_latest_version(
    opener: Callable[[urllib.request.Request], Any] | None = None,
) -> Version:
    """Fetch the tag of the latest release and parse it as a version."""
    open_request = opener or urllib.request.urlopen
    request = urllib.request.Request(LATEST_RELEASE_URL, method="GET")

    logger.debug("Fetching latest release")
    try:
        response = open_request(request)
    except urllib.error.HTTPError as exc:
        logger.error("Error while fetching latest release: status %s", exc.code)
        raise ReleaseError("Something went wrong while fetching the latest release") from exc

    with response:
        if response.status != 200:
            logger.error("Error while fetching latest release: status %s", response.status)
            raise ReleaseError("Something went wrong while fetching the latest release")
        data = response.read()

    release = json.loads(data)
    tag = str(release.get("tag_name") or "") if isinstance(release, dict) else ""
    logger.debug("Latest release fetched: %s", tag)
    return parse_version(tag)


def current_version(version: str) -> Version | None:
    """The running version, or None for a development build."""
    if version == "dev":
        return None
    return parse_version(version)


def needs_to_update(
    version: str,
    fetch: Callable[[], Version] | None = None,
) -> tuple[bool, Version | None]:
    """Return (update available, latest version); any failure gives (False, None)."""
    try:
        current = current_version(version)
    except ValueError as exc:
        logger.error("Error while reading current version: %s", exc)
        return False, None

    try:
        latest = (fetch or fetch_latest_version)()
    except (ReleaseError, ValueError, OSError) as exc:
        logger.error("Error while fetching latest version: %s", exc)
        return False, None

    # Development builds always offer the latest release.
    if current is None:
        return True, latest
    return latest.is_newer_than(current), latest