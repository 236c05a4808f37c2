"""Index-based scanning helpers shared by the Cookie and Set-Cookie parsers.

All helpers work on ``(text, start, end)`` windows instead of splitting,
so the parsers can walk a header once and backtrack without copying.
"""

import logging

from crumb.config import Decoder

logger = logging.getLogger("crumb.decode")

# RFC 7230 OWS: space and horizontal tab only
_OWS = " \t"


def find_end(text: str, start: int, length: int) -> int:
    """Index of the next ``;`` at or after *start*, or *length* if none."""
    index = text.find(";", start, length)
    return length if index == -1 else index


def find_eq(text: str, start: int, limit: int) -> int:
    """Index of the next ``=`` at or after *start* and before *limit*, or -1."""
    return text.find("=", start, limit)


def trim_ows(text: str, start: int, end: int) -> str:
    """Slice ``text[start:end]`` without leading or trailing OWS."""
    while start < end and text[start] in _OWS:
        start += 1
    while end > start and text[end - 1] in _OWS:
        end -= 1
    return text[start:end]


def unquote(value: str) -> str:
    """Strip one layer of surrounding double quotes, if both are present."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def decode_or_original(decode: Decoder, raw: str) -> str | None:
    """Run *decode* on *raw*, falling back to *raw* if it raises."""
    try:
        return decode(raw)
    except Exception:
        logger.debug("Decoder failed on %r, keeping raw value", raw, exc_info=True)
        return raw


def pair_value(decode: Decoder, text: str, start: int, end: int) -> str | None:
    """Trim, unquote and decode the cookie-value in ``text[start:end]``."""
    return decode_or_original(decode, unquote(trim_ows(text, start, end)))
