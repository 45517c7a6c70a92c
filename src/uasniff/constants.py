"""
    uasniff.constants
    ~~~~~~~~~~~~~~~~~

    Canonical operating system and client names, so results can be
    compared against names instead of string literals.
"""

# Operating systems
WINDOWS = "Windows"
WINDOWS_PHONE = "Windows Phone"
ANDROID = "Android"
MACOS = "macOS"
IOS = "iOS"
LINUX = "Linux"
FREEBSD = "FreeBSD"
CHROMEOS = "ChromeOS"
BLACKBERRY = "BlackBerry"
KAIOS = "KaiOS"

# Browsers
OPERA = "Opera"
OPERA_MINI = "Opera Mini"
OPERA_TOUCH = "Opera Touch"
CHROME = "Chrome"
HEADLESS_CHROME = "Headless Chrome"
FIREFOX = "Firefox"
INTERNET_EXPLORER = "Internet Explorer"
SAFARI = "Safari"
EDGE = "Edge"
VIVALDI = "Vivaldi"
SAMSUNG_BROWSER = "Samsung Browser"
MIUI_BROWSER = "Miui Browser"
HUAWEI_BROWSER = "Huawei Browser"
NETFRONT = "NetFront"
ANDROID_BROWSER = "Android browser"

# Crawlers
GOOGLE_ADS_BOT = "Google Ads Bot"
GOOGLEBOT = "Googlebot"
TWITTERBOT = "Twitterbot"
FACEBOOK_EXTERNAL_HIT = "facebookexternalhit"
APPLEBOT = "Applebot"
BINGBOT = "Bingbot"
YANDEXBOT = "YandexBot"
YAHOO_AD_MONITORING = "Yahoo Ad monitoring"

# In-app webviews
FACEBOOK_APP = "Facebook App"
INSTAGRAM_APP = "Instagram App"
TIKTOK_APP = "TikTok App"
