import pytest

from splash_cli.versions import Version, parse_version


def test_parse_version():
    assert parse_version("1.2.3") == Version(1, 2, 3)


@pytest.mark.parametrize("text", ["0.0.1", "4.10.22", "12.0.0"])
def test_round_trip(text):
    assert str(parse_version(text)) == text


@pytest.mark.parametrize("text", ["1.2", "v1.2.3", "1.x.3", ""])
def test_invalid_versions(text):
    with pytest.raises(ValueError):
        parse_version(text)


def test_newer_major():
    assert Version(2, 0, 0).is_newer_than(Version(1, 0, 0)) is True


def test_equal_is_not_newer():
    assert Version(1, 2, 3).is_newer_than(Version(1, 2, 3)) is False


def test_older_is_not_newer():
    assert Version(1, 0, 0).is_newer_than(Version(1, 0, 1)) is False


def test_component_wise_comparison():
    # Each component is compared on its own.
    assert Version(1, 5, 0).is_newer_than(Version(2, 0, 0)) is True