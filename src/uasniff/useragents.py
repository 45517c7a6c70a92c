import typing as t

from . import constants as c
from . import rules
from ._internal import _log
from ._internal import _to_str
from .tokenizer import Tokenizer
from .version import parse_version
from .version import VersionNo

#: Crawlers that do not call themselves "bot" and send no URL.
_known_bots = frozenset((c.TWITTERBOT, c.FACEBOOK_EXTERNAL_HIT))


class UserAgent:
    """Represents a classified user agent string.  Instances are
    returned by :func:`parse` and :class:`UserAgentParser`; all fields
    are filled in by then and the object is owned by the caller.
    Fields that could not be determined are empty strings or ``False``.
    The following attributes exist:

    .. attribute:: string

       the raw user agent string, unmodified

    .. attribute:: url

       the first ``http://`` or ``https://`` URL in the string, usually
       a crawler's info page.  Empty if there is none.

    .. attribute:: name

       the name of the client, for example ``Chrome`` or ``Googlebot``.
       If no known signature matches, the best guess from the string
       or, failing that, the whole string.

    .. attribute:: version

       the version of the client as sent

    .. attribute:: version_no

       :attr:`version` as a :class:`~uasniff.version.VersionNo`

    .. attribute:: os

       the operating system.  One of the OS names in
       :mod:`uasniff.constants` or empty.

    .. attribute:: os_version

       the operating system version, dotted

    .. attribute:: os_version_no

       :attr:`os_version` as a :class:`~uasniff.version.VersionNo`

    .. attribute:: device

       the device model if the string names one, such as ``iPhone`` or
       ``GT-I9300``

    .. attribute:: mobile
    .. attribute:: tablet
    .. attribute:: desktop

       the device class.  ``tablet`` and ``mobile`` are never both set.

    .. attribute:: bot

       whether the client is a crawler or another automated agent
    """

    def __init__(self, string: str = "") -> None:
        self.string = string
        self.url = ""
        self.name = ""
        self.version = ""
        self.version_no = VersionNo()
        self.os = ""
        self.os_version = ""
        self.os_version_no = VersionNo()
        self.device = ""
        self.mobile = False
        self.tablet = False
        self.desktop = False
        self.bot = False

    def to_dict(self) -> t.Dict[str, t.Any]:
        """The fields as a plain :class:`dict`, with the version numbers
        as tuples.
        """
        rv = dict(vars(self))
        rv["version_no"] = tuple(self.version_no)
        rv["os_version_no"] = tuple(self.os_version_no)
        return rv

    def to_header(self) -> str:
        return self.string

    def __str__(self) -> str:
        return self.string

    def __bool__(self) -> bool:
        return bool(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserAgent):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}/{self.version}>"

    @property
    def is_unknown(self) -> bool:
        return not self.name

    # operating systems

    @property
    def is_android(self) -> bool:
        return self.os == c.ANDROID

    @property
    def is_ios(self) -> bool:
        return self.os == c.IOS

    @property
    def is_windows(self) -> bool:
        return self.os == c.WINDOWS

    @property
    def is_windows_phone(self) -> bool:
        return self.os == c.WINDOWS_PHONE

    @property
    def is_macos(self) -> bool:
        return self.os == c.MACOS

    @property
    def is_linux(self) -> bool:
        return self.os == c.LINUX

    @property
    def is_freebsd(self) -> bool:
        return self.os == c.FREEBSD

    @property
    def is_chromeos(self) -> bool:
        return self.os == c.CHROMEOS

    @property
    def is_blackberry(self) -> bool:
        return self.os == c.BLACKBERRY

    @property
    def is_kaios(self) -> bool:
        return self.os == c.KAIOS

    # clients

    @property
    def is_chrome(self) -> bool:
        return self.name == c.CHROME

    @property
    def is_firefox(self) -> bool:
        return self.name == c.FIREFOX

    @property
    def is_safari(self) -> bool:
        return self.name == c.SAFARI

    @property
    def is_opera(self) -> bool:
        return self.name == c.OPERA

    @property
    def is_opera_mini(self) -> bool:
        return self.name == c.OPERA_MINI

    @property
    def is_edge(self) -> bool:
        return self.name == c.EDGE

    @property
    def is_internet_explorer(self) -> bool:
        return self.name == c.INTERNET_EXPLORER

    @property
    def is_googlebot(self) -> bool:
        return self.name == c.GOOGLEBOT

    @property
    def is_twitterbot(self) -> bool:
        return self.name == c.TWITTERBOT

    @property
    def is_facebookbot(self) -> bool:
        return self.name == c.FACEBOOK_EXTERNAL_HIT


class UserAgentParser:
    """Classifies user agent strings.  Used by :func:`parse`.

    Classification tokenizes the string, takes out an embedded URL,
    runs :attr:`platform_rules` and then :attr:`browser_rules` (the
    first matching rule of each table wins) and finally makes the
    device flags consistent.

    The parser keeps its tokenizer buffers between calls so repeated
    use does not allocate them again.  **A parser is not safe to use
    from several threads at once**; nothing guards against it.  Keep
    one parser per thread or worker, or call :func:`parse`, which
    creates a new parser every time.

    To recognize more clients, subclass and extend the rule tables::

        class MyParser(UserAgentParser):
            browser_rules = (
                (lambda tokens: tokens.exists("MyApp"), my_app_action),
            ) + UserAgentParser.browser_rules
    """

    platform_rules: t.ClassVar[t.Sequence[rules.Rule]] = rules.platform_rules
    browser_rules: t.ClassVar[t.Sequence[rules.Rule]] = rules.browser_rules

    def __init__(self) -> None:
        self.tokenizer = Tokenizer()

    def __call__(self, user_agent: t.Union[str, bytes, None]) -> UserAgent:
        string = _to_str(user_agent)
        ua = UserAgent(string)
        tokens = self.tokenizer.tokenize(string)

        for idx, token in enumerate(tokens):
            if token.key.startswith(("http://", "https://")):
                ua.url = token.key
                tokens.splice_out(idx)
                break

        for predicate, action in self.platform_rules:
            if predicate(tokens):
                action(ua, tokens)
                break
        else:
            _log("debug", "No platform signature in %r", string)

        for predicate, action in self.browser_rules:
            if predicate(tokens) and action(ua, tokens) is not False:
                break

        if ua.is_android:
            ua.mobile = True

        if ua.tablet:
            ua.mobile = False

        if not ua.bot:
            ua.bot = ua.url != "" or ua.name in _known_bots

        ua.version_no = parse_version(ua.version)
        ua.os_version_no = parse_version(ua.os_version)
        return ua

    parse = __call__


def parse(user_agent: t.Union[str, bytes, None]) -> UserAgent:
    """Classify a user agent string.

    A new :class:`UserAgentParser` is used for every call, so this is
    safe to call from any number of threads.

    >>> ua = parse("Twitterbot/1.0")
    >>> ua.name, ua.version, ua.bot
    ('Twitterbot', '1.0', True)
    """
    return UserAgentParser()(user_agent)
