"""
uasniff
~~~~~~~

Classifies ``User-Agent`` strings: client name and version, operating
system and version, device model and class, and whether the client is
a bot.

>>> from uasniff import parse
>>> ua = parse("Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)")
>>> ua.name, ua.version, ua.bot, ua.url
('Googlebot', '2.1', True, 'http://www.google.com/bot.html')

:license: BSD-3-Clause
"""
from .tokenizer import Tokenizer
from .tokens import Token
from .tokens import Tokens
from .useragents import parse
from .useragents import UserAgent
from .useragents import UserAgentParser
from .version import parse_version
from .version import VersionNo

__version__ = "1.0.0"
