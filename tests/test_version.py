import pytest

from uasniff.version import parse_version
from uasniff.version import VersionNo


@pytest.mark.parametrize(
    ("value", "expected"),
    (
        ("12.1.3", (12, 1, 3, 0)),
        ("59.0.3071.115", (59, 0, 3071, 115)),
        ("", (0, 0, 0, 0)),
        (None, (0, 0, 0, 0)),
        ("10", (10, 0, 0, 0)),
        ("8.1.1b4948", (8, 1, 1, 0)),
        ("28.0.2254/66.318", (28, 0, 2254, 0)),
        ("12.10.5-go", (12, 10, 5, 0)),
        ("1.2.3.4.5", (1, 2, 3, 4)),
        ("x86_64", (0, 0, 0, 0)),
        ("4.x.1", (4, 0, 0, 0)),
        ("...", (0, 0, 0, 0)),
        ("FBIOS", (0, 0, 0, 0)),
    ),
)
def test_parse_version(value, expected):
    assert parse_version(value) == expected


def test_ordering():
    assert parse_version("10.0.1") > parse_version("9.3")
    assert parse_version("59.0.3071.115") < parse_version("59.0.3071.116")
    assert parse_version("1.0") == parse_version("1")


def test_version_no():
    v = VersionNo(1, 2)
    assert v.major == 1
    assert v.minor == 2
    assert v.patch == 0
    assert v.build == 0
    assert str(v) == "1.2.0.0"
