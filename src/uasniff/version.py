import re
import typing as t

_leading_digits_re = re.compile(r"\d*")


class VersionNo(t.NamedTuple):
    """A version split into numbers.  Being a tuple, two versions can be
    compared directly::

        >>> parse_version("10.0.1") > parse_version("9.3")
        True
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0

    def __str__(self) -> str:
        return ".".join(map(str, self))


def parse_version(version: t.Optional[str]) -> VersionNo:
    """Decompose a version string into a :class:`VersionNo`.

    Parts are separated by dots and each part contributes its leading
    digits.  Parsing is best effort and never raises: it stops after
    the first part that is not a plain number, and components that
    were never filled stay ``0``.

    >>> parse_version("8.1.1b4948")
    VersionNo(major=8, minor=1, patch=1, build=0)
    >>> parse_version("")
    VersionNo(major=0, minor=0, patch=0, build=0)
    """
    if not version:
        return VersionNo()

    numbers = []

    for part in version.split(".", len(VersionNo._fields) - 1):
        digits = _leading_digits_re.match(part).group()  # type: ignore

        try:
            numbers.append(int(digits))
        except ValueError:
            # no digits, or more than int() accepts from a string
            numbers.append(0)
            break

        if len(digits) != len(part):
            break

    return VersionNo(*numbers)
