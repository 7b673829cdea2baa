"""Unsplash API client: OAuth login."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from splash_cli.models import AuthResponse

AUTHORIZE_URL = "https://unsplash.com/oauth/authorize"
TOKEN_URL = "https://unsplash.com/oauth/token"
DEFAULT_REDIRECT_URI = "http://localhost:5835"

# Reserved characters a URL path segment may carry unescaped.
_PATH_SEGMENT_SAFE = "$&+:=@"

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """The OAuth token exchange was refused."""


@dataclass
class UnsplashApi:
    """Credentials of an Unsplash application and how requests are sent."""

    client_id: str
    client_secret: str
    redirect_uri: str = DEFAULT_REDIRECT_URI
    opener: Callable[[urllib.request.Request], Any] | None = None

    def build_authentication_url(self, *scopes: str) -> str:
        """The authorization page URL asking for ``scopes``."""
        redirect = quote(self.redirect_uri, safe=_PATH_SEGMENT_SAFE)
        scope = "+".join(scopes)
        return (
            f"{AUTHORIZE_URL}?client_id={self.client_id}&redirect_uri={redirect}"
            f"&scope={scope}&response_type=code"
        )

    def _post_json(self, url: str, payload: dict[str, str]) -> tuple[int, bytes]:
        request = urllib.request.Request(
            url,
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={"Content-Type": "application/json"},
        )
        open_request = self.opener or urllib.request.urlopen
        try:
            response = open_request(request)
        except urllib.error.HTTPError as exc:
            try:
                return exc.code, exc.read()
            finally:
                exc.close()
        with response:
            return response.status, response.read()

    def authenticate(self, code: str) -> AuthResponse:
        """Exchange an authorization ``code`` for tokens; raise AuthenticationError if refused."""
        status, data = self._post_json(
            TOKEN_URL,
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": self.redirect_uri,
                "code": code,
                "grant_type": "authorization_code",
            },
        )

        if status != 200:
            error = json.loads(data)
            logger.error("Error while authenticating: status %s, %s", status, error.get("error"))
            raise AuthenticationError(str(error.get("error_description") or ""))

        return AuthResponse.from_dict(json.loads(data))