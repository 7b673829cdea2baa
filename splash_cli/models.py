"""Records returned by and sent to the Unsplash API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from splash_cli.query import url_param


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _number(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    return 0 if value is None else int(value)


def _flag(data: Mapping[str, Any], key: str) -> bool:
    return bool(data.get(key) or False)


def _nested(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    return data.get(key) or {}


@dataclass
class User:
    id: str = ""
    username: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        return cls(_text(data, "id"), _text(data, "username"), _text(data, "name"))


@dataclass
class Me:
    id: str = ""
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    bio: str = ""
    email: str = ""
    downloads: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Me:
        return cls(
            id=_text(data, "id"),
            username=_text(data, "username"),
            first_name=_text(data, "first_name"),
            last_name=_text(data, "last_name"),
            bio=_text(data, "bio"),
            email=_text(data, "email"),
            downloads=_number(data, "downloads"),
        )


@dataclass
class PhotoUrls:
    raw: str = ""
    full: str = ""
    regular: str = ""
    small: str = ""
    thumb: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PhotoUrls:
        return cls(
            raw=_text(data, "raw"),
            full=_text(data, "full"),
            regular=_text(data, "regular"),
            small=_text(data, "small"),
            thumb=_text(data, "thumb"),
        )


@dataclass
class Photo:
    id: str = ""
    downloads: int = 0
    likes: int = 0
    views: int = 0
    width: int = 0
    height: int = 0
    created_at: str = ""
    description: str = ""
    color: str = ""
    liked_by_user: bool = False
    urls: PhotoUrls = field(default_factory=PhotoUrls)
    user: User = field(default_factory=User)
    blurhash: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Photo:
        return cls(
            id=_text(data, "id"),
            downloads=_number(data, "downloads"),
            likes=_number(data, "likes"),
            views=_number(data, "views"),
            width=_number(data, "width"),
            height=_number(data, "height"),
            created_at=_text(data, "created_at"),
            description=_text(data, "description"),
            color=_text(data, "color"),
            liked_by_user=_flag(data, "liked_by_user"),
            urls=PhotoUrls.from_dict(_nested(data, "urls")),
            user=User.from_dict(_nested(data, "user")),
            blurhash=_text(data, "blur_hash"),
        )


@dataclass
class PhotoOfTheDay:
    id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PhotoOfTheDay:
        return cls(_text(data, "id"))


@dataclass
class RandomPhotoParams:
    """Query parameters of a random-photo request."""

    topics: list[str] = url_param("topics", [], separator="comma")
    orientation: str = url_param("orientation", "", default="landscape")
    query: str = url_param("query", "")
    collections: list[str] = url_param("collections", [], separator="comma")
    count: int = url_param("count", 0, default="1")
    username: str = url_param("username", "")


@dataclass
class TopicOwner:
    id: str = ""
    username: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TopicOwner:
        return cls(_text(data, "id"), _text(data, "username"), _text(data, "name"))


@dataclass
class Topic:
    id: str = ""
    slug: str = ""
    title: str = ""
    description: str = ""
    owners: list[TopicOwner] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Topic:
        return cls(
            id=_text(data, "id"),
            slug=_text(data, "slug"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            owners=[TopicOwner.from_dict(owner) for owner in data.get("owners") or []],
        )


@dataclass
class CollectionLinks:
    self_url: str = ""
    html: str = ""
    photos: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CollectionLinks:
        return cls(_text(data, "self"), _text(data, "html"), _text(data, "photos"))


@dataclass
class Collection:
    id: str = ""
    title: str = ""
    description: str = ""
    featured: bool = False
    total_photos: int = 0
    links: CollectionLinks = field(default_factory=CollectionLinks)
    user: User = field(default_factory=User)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Collection:
        return cls(
            id=_text(data, "id"),
            title=_text(data, "title"),
            description=_text(data, "description"),
            featured=_flag(data, "featured"),
            total_photos=_number(data, "total_photos"),
            links=CollectionLinks.from_dict(_nested(data, "links")),
            user=User.from_dict(_nested(data, "user")),
        )


_AUTH_TEXT_FIELDS = ("access_token", "token_type", "scope", "refresh_token")


@dataclass
class AuthResponse:
    access_token: str = ""
    token_type: str = ""
    scope: str = ""
    created_at: int = 0
    refresh_token: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AuthResponse:
        text_fields = {name: _text(data, name) for name in _AUTH_TEXT_FIELDS}
        return cls(created_at=_number(data, "created_at"), **text_fields)