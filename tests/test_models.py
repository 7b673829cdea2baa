from splash_cli.models import (
    AuthResponse,
    Collection,
    Me,
    Photo,
    PhotoOfTheDay,
    RandomPhotoParams,
    Topic,
    User,
)
from splash_cli.query import stringify

PHOTO = {
    "id": "abc123",
    "downloads": 42,
    "likes": 7,
    "views": 900,
    "width": 4000,
    "height": 3000,
    "created_at": "2020-01-01T00:00:00Z",
    "description": None,
    "color": "#ffffff",
    "liked_by_user": True,
    "urls": {"raw": "raw-url", "full": "full-url", "regular": "regular-url", "small": "s", "thumb": "t"},
    "user": {"id": "u1", "username": "someone", "name": "Some One"},
    "blur_hash": "LKO2?U%2Tw=w",
}


def test_photo_from_dict():
    photo = Photo.from_dict(PHOTO)
    assert photo.id == "abc123"
    assert photo.downloads == 42
    assert photo.liked_by_user is True
    assert photo.urls.raw == "raw-url"
    assert photo.urls.regular == "regular-url"
    assert photo.user == User("u1", "someone", "Some One")
    assert photo.blurhash == "LKO2?U%2Tw=w"


def test_null_description_becomes_empty():
    assert Photo.from_dict(PHOTO).description == ""


def test_missing_keys_use_defaults():
    assert Photo.from_dict({}) == Photo()


def test_me_from_dict():
    me = Me.from_dict({"id": "1", "username": "me", "first_name": "A", "last_name": "B", "downloads": 3})
    assert (me.username, me.first_name, me.last_name, me.downloads) == ("me", "A", "B", 3)
    assert me.email == ""


def test_topic_owners():
    topic = Topic.from_dict(
        {"id": "t", "slug": "nature", "owners": [{"id": "o", "username": "owner", "name": "Owner"}]}
    )
    assert topic.slug == "nature"
    assert [owner.username for owner in topic.owners] == ["owner"]


def test_collection_from_dict():
    collection = Collection.from_dict(
        {
            "id": "3644553",
            "title": "stockpapers",
            "total_photos": 12,
            "featured": True,
            "links": {"self": "self-link", "html": "html-link", "photos": "photos-link"},
            "user": {"username": "curator"},
        }
    )
    assert collection.links.self_url == "self-link"
    assert collection.links.html == "html-link"
    assert collection.total_photos == 12
    assert collection.user.username == "curator"


def test_auth_response_from_dict():
    response = AuthResponse.from_dict(
        {"access_token": "token", "refresh_token": "token", "token_type": "bearer", "created_at": 10}
    )
    assert response.access_token == "token"
    assert response.created_at == 10


def test_photo_of_the_day():
    assert PhotoOfTheDay.from_dict({"id": "xyz"}).id == "xyz"


def test_random_photo_params_defaults():
    assert stringify(RandomPhotoParams()) == "orientation=landscape&count=1"


def test_random_photo_params_values():
    params = RandomPhotoParams(orientation="portrait", query="sea", topics=["a", "b"], count=3)
    parts = stringify(params).split("&")
    assert "orientation=portrait" in parts
    assert "query=sea" in parts
    assert "count=3" in parts
    assert parts[0].startswith("topics=a")