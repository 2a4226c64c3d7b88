import pytest

from duckengine.errors import EngineError, ErrorType
from duckengine.util import Version


def test_default_is_zero():
    assert Version() == Version(0, 0, 0)


def test_parse_simple():
    assert Version.from_string("1.2.3") == Version(1, 2, 3)


def test_parse_ignores_trailing_text():
    assert Version.from_string("4.5.6-beta") == Version(4, 5, 6)


def test_parse_allows_leading_whitespace():
    assert Version.from_string("  7.8.9") == Version(7, 8, 9)


@pytest.mark.parametrize("text", ["", "1.2", "a.b.c", "1..2", "1 .2.3", "v1.2.3"])
def test_parse_rejects_malformed(text):
    with pytest.raises(EngineError) as info:
        Version.from_string(text)
    assert info.value.kind is ErrorType.INVALID_FORMAT


def test_max_components_are_unsigned_limit():
    top = Version.max()
    assert top.major == top.minor == top.patch == 4294967295


def test_negative_component_wraps_to_max():
    assert Version.from_string("-1.0.0").major == Version.max().major


def test_string_round_trip():
    version = Version(10, 0, 42)
    assert Version.from_string(str(version)) == version


def test_string_format():
    assert str(Version(1, 2, 3)) == "1.2.3"


def test_inequality():
    assert Version(1, 2, 3) != Version.max()