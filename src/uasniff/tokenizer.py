import typing as t

from .tokens import Tokens

#: Boilerplate that carries no information and is dropped while
#: tokenizing.
IGNORED_TOKENS = frozenset(
    (
        "KHTML, like Gecko",
        "U",
        "compatible",
        "Mozilla",
        "WOW64",
        "en",
        "en-us",
        "en-gb",
        "ru-ru",
        "Browser",
    )
)

#: Keys that are followed by a space separated version, as in
#: ``Windows NT 10.0`` or ``Android 4.3``.
_versioned_keys = frozenset(
    ("Linux", "Windows NT", "Windows Phone OS", "MSIE", "Android")
)

#: ``CrOS <arch> <build>`` markers, split into ``CrOS`` and the
#: architecture.
_chromeos_keys = frozenset(("CrOS x86_64", "CrOS aarch64", "CrOS armv7l"))


def check_version(s: str) -> t.Tuple[str, str]:
    """Split a token without a ``/`` separated value into key and
    version if the key is one that puts its version after a space.

    >>> check_version("Windows NT 6.1")
    ('Windows NT', '6.1')
    >>> check_version("CrOS x86_64 14541.0.0")
    ('CrOS', 'x86_64')
    >>> check_version("Intel Mac OS X 10_15_7")
    ('Intel Mac OS X 10_15_7', '')
    """
    idx = s.rfind(" ")
    if idx == -1:
        return s, ""

    head = s[:idx]
    if head in _versioned_keys:
        return head, s[idx + 1 :]
    if head in _chromeos_keys:
        arch_idx = head.rfind(" ")
        return head[:arch_idx], head[arch_idx + 1 :]
    return s, ""


class Tokenizer:
    """Split a user agent string into :class:`~uasniff.tokens.Tokens`.

    User agents have no grammar, so this is a single forgiving scan.
    Tokens end at ``(``, ``)``, ``;``, ``[`` and ``]``.  A ``/`` switches
    from collecting the key to collecting the value, which then ends at
    the next space, so ``Chrome/91.0`` becomes ``("Chrome", "91.0")``.
    ``http://`` and ``https://`` URLs are kept whole in the key.  Nothing
    in the input can make it fail.

    The key and value buffers and the token list are kept on the
    instance and reused by every call to :meth:`tokenize`.  The returned
    :class:`~uasniff.tokens.Tokens` is the same object each time and is
    only valid until the next call.  An instance must not be used from
    two threads at once.
    """

    def __init__(self) -> None:
        self.tokens = Tokens()
        self._key: t.List[str] = []
        self._value: t.List[str] = []
        self._in_value = False
        self._in_url = False

    def _key_endswith(self, suffix: str) -> bool:
        n = len(suffix)
        return len(self._key) >= n and "".join(self._key[-n:]) == suffix

    def _flush(self) -> None:
        if self._key:
            key = "".join(self._key).strip()

            if key not in IGNORED_TOKENS:
                if self._in_url:
                    key = key[1:] if key.startswith("+") else key

                if not self._value:
                    key, value = check_version(key)
                else:
                    value = "".join(self._value).strip()

                if key:
                    self.tokens.add(key, value)

        del self._key[:]
        del self._value[:]
        self._in_value = False
        self._in_url = False

    def tokenize(self, user_agent: str) -> Tokens:
        self.tokens.clear()
        del self._key[:]
        del self._value[:]
        self._in_value = False
        self._in_url = False

        key = self._key
        last = len(user_agent) - 1

        for idx, c in enumerate(user_agent):
            if c in "();[]":
                self._flush()
            elif c == ":":
                if self._key_endswith("http") or self._key_endswith("https"):
                    key.append(c)
                elif idx != last and user_agent[idx + 1] != " ":
                    # "key:value" where "key value" was meant
                    key.append(" ")
            elif self._in_value:
                if c == " ":
                    self._flush()
                else:
                    self._value.append(c)
            elif c == "/" and not self._in_url:
                if (
                    idx != last
                    and user_agent[idx + 1] == "/"
                    and (self._key_endswith("http:") or self._key_endswith("https:"))
                ):
                    key.append(c)
                    self._in_url = True
                elif "".join(key) in IGNORED_TOKENS:
                    del key[:]
                else:
                    self._in_value = True
            else:
                key.append(c)

        self._flush()
        return self.tokens
