"""Building and sending requests to the Unsplash API."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable
from enum import Enum
from typing import Any

from splash_cli.query import stringify

API_ROOT = "https://api.unsplash.com"

logger = logging.getLogger(__name__)


class AuthorizationKind(str, Enum):
    BEARER = "Bearer"
    CLIENT = "Client-ID"


class HttpError(Exception):
    """The server answered with a status of 300 or above."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"Error: {status} {reason}".rstrip())


def build_request(
    method: str,
    pathname: str,
    params: Any = None,
    body: Any = None,
) -> urllib.request.Request:
    """Build a request for ``pathname`` on the API, with optional query params and JSON body."""
    url = API_ROOT + pathname
    if params is not None:
        url += "?" + stringify(params)

    logger.debug("%s %s", method, url)

    if body is None:
        return urllib.request.Request(url, method=method)

    request = urllib.request.Request(url, data=json.dumps(body).encode("utf-8"), method=method)
    request.add_header("Content-Type", "application/json")
    request.add_header("Accept", "application/json")
    return request


def add_authorization(request: urllib.request.Request, kind: str, token: str) -> None:
    """Set the Authorization header; any kind other than Bearer is sent as Client-ID."""
    scheme = AuthorizationKind.BEARER if kind == AuthorizationKind.BEARER else AuthorizationKind.CLIENT
    request.add_header("Authorization", f"{scheme.value} {token}")


def is_error(status: int) -> bool:
    """True for statuses of 300 and above."""
    return status >= 300


def execute_request(
    request: urllib.request.Request,
    opener: Callable[[urllib.request.Request], Any] | None = None,
) -> bytes:
    """Send ``request`` and return the response body; raise HttpError on an error status."""
    open_request = opener or urllib.request.urlopen
    try:
        response = open_request(request)
    except urllib.error.HTTPError as exc:
        raise HttpError(exc.code, str(exc.reason)) from exc

    with response:
        if is_error(response.status):
            raise HttpError(response.status, response.reason)
        return response.read()