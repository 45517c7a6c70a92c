import logging
import typing as t

_logger: t.Optional[logging.Logger] = None


def _to_str(x: t.Optional[t.Union[str, bytes, bytearray]]) -> str:
    """Coerce a user agent value to :class:`str`.

    Bytes are decoded as latin-1 the way WSGI servers decode header
    values, so every possible byte string maps to some text and
    decoding never fails.
    """
    if x is None:
        return ""

    if isinstance(x, str):
        return x

    if isinstance(x, (bytes, bytearray, memoryview)):
        return bytes(x).decode("latin1")

    raise TypeError(
        f"Expected a user agent string or bytes, got {type(x).__name__!r}"
    )


def _has_level_handler(logger: logging.Logger) -> bool:
    """Check if there is a handler in the logging chain that will handle
    the given logger's effective level.
    """
    level = logger.getEffectiveLevel()
    current: t.Optional[logging.Logger] = logger

    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True

        if not current.propagate:
            break

        current = current.parent

    return False


def _log(type: str, message: str, *args: t.Any, **kwargs: t.Any) -> None:
    """Log a message to the 'uasniff' logger.

    The logger is created the first time it is needed. If there is no
    level set, it is set to :data:`logging.INFO`. If there is no handler
    for the logger's effective level, a :class:`logging.StreamHandler`
    is added.
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger("uasniff")

        if _logger.level == logging.NOTSET:
            _logger.setLevel(logging.INFO)

        if not _has_level_handler(_logger):
            _logger.addHandler(logging.StreamHandler())

    getattr(_logger, type)(message.rstrip(), *args, **kwargs)
