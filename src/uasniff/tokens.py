import re
import typing as t

_version_re = re.compile(r"[_\d.]+")

#: Generic, engine and platform keys never picked as a client name by
#: :meth:`Tokens.find_best_match`.
_generic_keys = frozenset(
    (
        "Chrome",
        "Firefox",
        "Safari",
        "Version",
        "Mobile",
        "Mobile Safari",
        "Mozilla",
        "AppleWebKit",
        "Windows NT",
        "Windows Phone OS",
        "Android",
        "Macintosh",
        "Linux",
        "GSA",
        "CrOS",
        "Tablet",
    )
)


class Token(t.NamedTuple):
    key: str
    value: str = ""


def find_version(s: str) -> str:
    """Return the first run of digits, dots and underscores in ``s``
    with underscores turned into dots, or an empty string.

    >>> find_version("CPU iPhone OS 10_3_2 like Mac OS X")
    '10.3.2'
    """
    match = _version_re.search(s)
    if match is None:
        return ""
    return match.group().replace("_", ".")


class Tokens:
    """The ordered ``(key, value)`` tokens of one user agent string.

    Works like a list of :class:`Token` that keeps the order in which
    the tokens appeared and may hold the same key more than once.
    Lookups by key return the first match.  Iterating yields the tokens.

    A ``Tokens`` object is scratch state for a single classification;
    rules may consume a token with :meth:`splice_out` or rename it with
    :meth:`relabel` so later rules do not read it again.  It is not
    meant to be shared between threads.

    :param defaults: An iterable of ``(key, value)`` pairs to start with.
    """

    def __init__(self, defaults: t.Optional[t.Iterable[t.Tuple[str, str]]] = None):
        self._list: t.List[Token] = []
        if defaults is not None:
            for key, value in defaults:
                self.add(key, value)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._list[index])
        return self._list[index]

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> t.Iterator[Token]:
        return iter(self._list)

    def __contains__(self, key: object) -> bool:
        return self.exists(key)  # type: ignore

    def __eq__(self, other: object) -> bool:
        return other.__class__ is self.__class__ and self._list == other._list  # type: ignore # noqa: B950

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._list!r})"

    def add(self, key: str, value: str = "") -> None:
        """Append a token at the end."""
        self._list.append(Token(key, value))

    def clear(self) -> None:
        del self._list[:]

    def get(self, key: str) -> str:
        """Return the value of the first token named ``key`` or an empty
        string.  A token without a value and a missing token look the
        same here, use :meth:`exists` to tell them apart.
        """
        for k, v in self._list:
            if k == key:
                return v
        return ""

    def get_index(self, key: str) -> t.Tuple[int, str]:
        """Like :meth:`get` but also return the position of the token,
        ``(-1, "")`` if it is missing.
        """
        for idx, (k, v) in enumerate(self._list):
            if k == key:
                return idx, v
        return -1, ""

    def exists(self, key: str) -> bool:
        for k, _ in self._list:
            if k == key:
                return True
        return False

    def exists_any(self, *keys: str) -> bool:
        return any(self.exists(key) for key in keys)

    def startswith(self, prefix: str) -> bool:
        """Check if the key of any token starts with ``prefix``."""
        return any(k.startswith(prefix) for k, _ in self._list)

    def find_version(self, marker: str, prefix: bool = False) -> str:
        """Find a version embedded in a token.

        Every token whose key contains ``marker`` (or starts with it if
        ``prefix`` is set) is checked in order; the version is taken
        from its value if it has one there, otherwise from the key
        itself.  This covers ``CPU OS 10_3_2 like Mac OS X`` style keys
        as well as ``Instagram 123.0.0.21.115 Android``.
        """
        for k, v in self._list:
            if k.startswith(marker) if prefix else marker in k:
                ver = find_version(v) or find_version(k)
                if ver:
                    return ver
        return ""

    def find_best_match(self, with_version_only: bool = False) -> str:
        """Guess the client name from the remaining tokens.

        Generic engine and platform keys and keys starting with a digit
        are skipped.  The first pass returns the first key that carries
        a version value.  Unless ``with_version_only`` is set, a second
        pass returns the first key at all.  Returns an empty string if
        nothing qualifies.
        """
        candidates = [
            (k, v)
            for k, v in self._list
            if k not in _generic_keys and not "0" <= k[:1] <= "9"
        ]

        for k, v in candidates:
            if v:
                return k

        if not with_version_only and candidates:
            return candidates[0][0]

        return ""

    def splice_out(self, index: int) -> Token:
        """Remove the token at ``index`` and return it."""
        return self._list.pop(index)

    def relabel(self, index: int, key: str) -> None:
        """Rename the token at ``index``, keeping its value and position."""
        self._list[index] = self._list[index]._replace(key=key)
