"""Recognise Unsplash photo and collection URLs and pull identifiers out of them."""

from __future__ import annotations

import re

COLLECTION_ID_EXTRACTOR = re.compile(
    r"unsplash\.com/collections/([A-z0-9]+)/([a-z\-]+)/?\Z", re.ASCII
)
PHOTO_ID_EXTRACTOR = re.compile(r"https?://unsplash\.com/photos/(\w+-)+(\w+)\Z", re.ASCII)
URL_REMOVER = re.compile(r"(https?://)?unsplash\.com/photos/(\w+-)+", re.ASCII)


def is_photo_url(url: str) -> bool:
    """Return True if ``url`` looks like an Unsplash photo page URL."""
    return URL_REMOVER.search(url) is not None


def is_collection_url(url: str) -> bool:
    """Return True if ``url`` looks like an Unsplash collection URL."""
    return COLLECTION_ID_EXTRACTOR.search(url) is not None


def cleanup_url(url: str) -> str:
    """Strip the URL and slug prefix from a photo URL, or return "" if it is not one."""
    if URL_REMOVER.search(url) is None:
        return ""
    return URL_REMOVER.sub("", url)


def extract_photo_id(url: str) -> str:
    """Return the photo id at the end of a photo URL, or "" if there is none."""
    match = PHOTO_ID_EXTRACTOR.search(url)
    return match.group(2) if match else ""


def extract_collection_id(url: str) -> tuple[str, str]:
    """Return (id, name) of a collection URL, or ("", "") if it is not one."""
    match = COLLECTION_ID_EXTRACTOR.search(url)
    if match is None:
        return "", ""
    return match.group(1), match.group(2)