"""
    uasniff.rules
    ~~~~~~~~~~~~~

    The ordered signature tables used by
    :class:`~uasniff.useragents.UserAgentParser`.

    Each table is a sequence of ``(predicate, action)`` pairs.  The
    predicate is called with the :class:`~uasniff.tokens.Tokens` of the
    user agent, the action with the :class:`~uasniff.useragents.UserAgent`
    being filled in and the tokens.  The first rule whose predicate
    holds wins.  An action may return ``False`` to hand over to the rules
    after it as if its predicate had not matched.

    Order is significant.  A new signature is added by inserting a pair
    at the right position, never by reordering existing ones.
"""
import typing as t

from . import constants as c
from ._internal import _log
from .tokens import Tokens

if t.TYPE_CHECKING:
    from .useragents import UserAgent  # noqa: F401

Predicate = t.Callable[[Tokens], bool]
Action = t.Callable[["UserAgent", Tokens], t.Optional[bool]]
Rule = t.Tuple[Predicate, Action]

#: Tokens that may follow the Android token but are not device names.
_not_devices = frozenset(
    (
        "Chrome",
        "Firefox",
        "Safari",
        "Opera Mini",
        "Presto",
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
        "CrOS",
    )
)


def find_android_device(tokens: Tokens, os_index: int) -> str:
    """Return the device name from the token right after the Android
    token at ``os_index``.  Only that one token is looked at.

    Locale tags and known browser, engine and platform tokens are not
    devices.  A device token mentioning "tablet" is renamed to
    ``Tablet`` so browser rules can still see it; any other device
    token is removed.  A trailing ``Build`` is cut from the name.
    """
    idx = os_index + 1
    if idx >= len(tokens):
        return ""

    dev = tokens[idx].key

    # language tag such as "en" or "en-us"
    if len(dev) == 2 or (len(dev) == 5 and dev[2] == "-"):
        return ""

    if dev in _not_devices:
        return ""

    if "tablet" in dev.lower():
        tokens.relabel(idx, "Tablet")
    else:
        tokens.splice_out(idx)

    if dev.endswith("Build"):
        dev = dev[: -len("Build")]
    return dev.strip()


def _has(*keys: str) -> Predicate:
    """Match if a token with any of the keys exists."""
    return lambda tokens: tokens.exists_any(*keys)


def _has_value(key: str) -> Predicate:
    """Match if a token with the key exists and has a version."""
    return lambda tokens: tokens.get(key) != ""


def _always(tokens: Tokens) -> bool:
    return True


def _is_mobile(tokens: Tokens) -> bool:
    return tokens.exists_any("Mobile", "Mobile Safari")


# -- operating systems ------------------------------------------------------


def _android(ua: "UserAgent", tokens: Tokens) -> None:
    ua.os = c.ANDROID
    os_index, ua.os_version = tokens.get_index("Android")
    ua.tablet = "tablet" in ua.string.lower()
    ua.device = find_android_device(tokens, os_index)


def _apple_device(device: str, tablet: bool = False) -> Action:
    def action(ua: "UserAgent", tokens: Tokens) -> None:
        ua.os = c.IOS
        ua.os_version = tokens.find_version("OS")
        ua.device = device
        if tablet:
            ua.tablet = True
        else:
            ua.mobile = True

    return action


def _macos(ua: "UserAgent", tokens: Tokens) -> None:
    ua.os = c.MACOS
    ua.os_version = tokens.find_version("OS")
    ua.desktop = True


def _platform(os: str, *keys: str, mobile: bool = False) -> Action:
    """Set the OS with the version from the first of ``keys`` that has
    one.  Platforms are desktops unless ``mobile`` is given.
    """

    def action(ua: "UserAgent", tokens: Tokens) -> None:
        ua.os = os
        for key in keys:
            ua.os_version = tokens.get(key)
            if ua.os_version:
                break
        if mobile:
            ua.mobile = True
        else:
            ua.desktop = True

    return action


platform_rules: t.Tuple[Rule, ...] = (
    (_has("Android"), _android),
    (_has("iPhone"), _apple_device("iPhone")),
    (_has("iPad"), _apple_device("iPad", tablet=True)),
    (_has("Windows NT"), _platform(c.WINDOWS, "Windows NT")),
    (_has("Windows Phone OS"), _platform(c.WINDOWS_PHONE, "Windows Phone OS", mobile=True)),  # noqa: B950
    (_has("Macintosh"), _macos),
    (_has("Linux"), _platform(c.LINUX, "Linux")),
    (_has("FreeBSD"), _platform(c.FREEBSD, "FreeBSD")),
    (_has("CrOS"), _platform(c.CHROMEOS, "CrOS")),
    (_has("BlackBerry"), _platform(c.BLACKBERRY, "BlackBerry", mobile=True)),
    (_has("KAIOS", "KaiOS"), _platform(c.KAIOS, "KAIOS", "KaiOS", mobile=True)),
)


# -- browsers and bots ------------------------------------------------------


def _browser(
    name: str,
    key: t.Optional[str] = None,
    bot: bool = False,
    mobile: t.Optional[bool] = None,
) -> Action:
    """The common shape of a browser rule: the name is fixed and the
    version is the value of ``key`` (``name`` by default).  Mobile is
    taken from the ``Mobile`` tokens unless forced with ``mobile``.
    """
    key = key or name

    def action(ua: "UserAgent", tokens: Tokens) -> None:
        ua.name = name
        ua.version = tokens.get(key)  # type: ignore
        ua.mobile = _is_mobile(tokens) if mobile is None else mobile
        if bot:
            ua.bot = True

    return action


def _google_prober(ua: "UserAgent", tokens: Tokens) -> None:
    name = tokens.find_best_match()
    if name:
        ua.name = name
    ua.bot = True


def _applebot(ua: "UserAgent", tokens: Tokens) -> None:
    _browser(c.APPLEBOT, bot=True)(ua, tokens)
    # Applebot pretends to be a Mac
    ua.os = ""


def _firefox(ua: "UserAgent", tokens: Tokens) -> None:
    ua.name = c.FIREFOX
    ua.version = tokens.get("Firefox")
    ua.mobile = tokens.exists("Mobile")
    ua.tablet = tokens.exists("Tablet")


def _version_from(name: str, key: str) -> Action:
    """Set name and version only, leaving the device flags alone."""

    def action(ua: "UserAgent", tokens: Tokens) -> None:
        ua.name = name
        ua.version = tokens.get(key)

    return action


def _ads_bot(name: str) -> Action:
    def action(ua: "UserAgent", tokens: Tokens) -> None:
        ua.name = name
        ua.bot = True
        ua.mobile = ua.is_android or ua.is_ios

    return action


def _miui(ua: "UserAgent", tokens: Tokens) -> t.Optional[bool]:
    miui = tokens.get("XiaoMi")
    if not miui.startswith("MiuiBrowser"):
        return False
    ua.name = c.MIUI_BROWSER
    if miui.startswith("MiuiBrowser/"):
        miui = miui[len("MiuiBrowser/") :]
    ua.version = miui
    ua.mobile = True
    return None


def _instagram(ua: "UserAgent", tokens: Tokens) -> None:
    ua.name = c.INSTAGRAM_APP
    ua.version = tokens.find_version("Instagram", prefix=True)


def _embedded_in_chrome(ua: "UserAgent", tokens: Tokens) -> t.Optional[bool]:
    # Chrome and Safari together are sent by every Chromium based
    # browser, look for another versioned token naming the real one.
    name = tokens.find_best_match(with_version_only=True)
    if not name:
        return False
    ua.name = name
    ua.version = tokens.get(name)
    return None


def _safari(ua: "UserAgent", tokens: Tokens) -> None:
    ua.name = c.SAFARI
    ua.version = tokens.get("Version") or tokens.get("Safari")
    ua.mobile = _is_mobile(tokens)


def _fallback(ua: "UserAgent", tokens: Tokens) -> None:
    if ua.os == c.ANDROID and tokens.get("Version"):
        ua.name = c.ANDROID_BROWSER
        ua.version = tokens.get("Version")
        ua.mobile = True
        return

    name = tokens.find_best_match()
    _log("debug", "No client signature in %r, guessed %r", ua.string, name)
    if name:
        ua.name = name
        ua.version = tokens.get(name)
    else:
        ua.name = ua.string
    ua.bot = "bot" in ua.name.lower()
    if not ua.mobile:
        ua.mobile = _is_mobile(tokens)


browser_rules: t.Tuple[Rule, ...] = (
    (_has("Googlebot"), _browser(c.GOOGLEBOT, bot=True)),
    (_has("GoogleProber", "GoogleProducer"), _google_prober),
    (_has("Applebot"), _applebot),
    (_has_value("Opera Mini"), _browser(c.OPERA_MINI, mobile=True)),
    (_has_value("OPR"), _browser(c.OPERA, "OPR")),
    (_has_value("OPT"), _browser(c.OPERA_TOUCH, "OPT")),
    (_has_value("OPiOS"), _browser(c.OPERA, "OPiOS")),
    (_has_value("CriOS"), _browser(c.CHROME, "CriOS")),
    (_has_value("FxiOS"), _browser(c.FIREFOX, "FxiOS")),
    (_has_value("Firefox"), _firefox),
    (_has_value("Vivaldi"), _version_from(c.VIVALDI, "Vivaldi")),
    (_has("MSIE"), _version_from(c.INTERNET_EXPLORER, "MSIE")),
    (_has_value("EdgiOS"), _browser(c.EDGE, "EdgiOS")),
    (_has_value("Edge"), _browser(c.EDGE, "Edge")),
    (_has_value("Edg"), _browser(c.EDGE, "Edg")),
    (_has_value("EdgA"), _browser(c.EDGE, "EdgA")),
    (_has_value("bingbot"), _browser(c.BINGBOT, "bingbot", bot=True)),
    (_has_value("YandexBot"), _browser(c.YANDEXBOT, bot=True)),
    (_has_value("SamsungBrowser"), _browser(c.SAMSUNG_BROWSER, "SamsungBrowser")),
    (_has_value("HeadlessChrome"), _browser(c.HEADLESS_CHROME, "HeadlessChrome", bot=True)),  # noqa: B950
    (
        _has("AdsBot-Google-Mobile", "Mediapartners-Google", "AdsBot-Google"),
        _ads_bot(c.GOOGLE_ADS_BOT),
    ),
    (_has("Yahoo Ad monitoring"), _ads_bot(c.YAHOO_AD_MONITORING)),
    (_has("XiaoMi"), _miui),
    (_has("FBAN"), _version_from(c.FACEBOOK_APP, "FBAN")),
    (_has("FB_IAB"), _version_from(c.FACEBOOK_APP, "FBAV")),
    (lambda tokens: tokens.startswith("Instagram"), _instagram),
    (_has("BytedanceWebview"), _version_from(c.TIKTOK_APP, "app_version")),
    (_has_value("HuaweiBrowser"), _browser(c.HUAWEI_BROWSER, "HuaweiBrowser")),
    (_has("BlackBerry"), _version_from(c.BLACKBERRY, "Version")),
    (_has("NetFront"), _browser(c.NETFRONT, mobile=True)),
    (lambda tokens: tokens.exists("Chrome") and tokens.exists("Safari"), _embedded_in_chrome),  # noqa: B950
    (_has("Chrome"), _browser(c.CHROME)),
    (_has("Brave Chrome"), _browser(c.CHROME, "Brave Chrome")),
    (_has("Safari"), _safari),
    (_always, _fallback),
)
