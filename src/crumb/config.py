"""Codec configuration.

ParseOptions and StringifyOptions are frozen dataclasses — immutable after
creation, no string-key dict lookups. Both default to percent-encoding,
the scheme browsers and most servers use for cookie values.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote, unquote

from crumb.errors import InvalidArgument

# Type aliases for value codecs
type Decoder = Callable[[str], str | None]
type Encoder = Callable[[str], str]

logger = logging.getLogger("crumb.decode")

# Characters encodeURIComponent leaves alone besides ASCII alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"

# A "%" not followed by two hex digits
_MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(value: str) -> str:
    """Percent-decode *value* as UTF-8, returning it unchanged on failure.

    Values without ``%`` skip decoding entirely. Malformed escapes
    (``%1``, ``%zz``) and escapes that are not valid UTF-8 leave the
    whole value untouched rather than half-decoded.
    """
    if "%" not in value:
        return value
    if _MALFORMED_ESCAPE_RE.search(value):
        logger.debug("Keeping malformed percent-encoding in %r", value)
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        logger.debug("Keeping undecodable cookie value %r", value)
        return value


def percent_encode(value: str) -> str:
    """Percent-encode *value* the way ``encodeURIComponent`` does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options for ``parse_cookie`` and ``parse_set_cookie``.

    Attributes:
        decode: Turns a raw cookie-value into a string. Defaults to
            ``percent_decode``. Exceptions raised by a custom decoder are
            caught and the raw value is used instead.
    """

    decode: Decoder = percent_decode

    def __post_init__(self) -> None:
        if not callable(self.decode):
            raise InvalidArgument("option", "decode", self.decode)


@dataclass(frozen=True, slots=True)
class StringifyOptions:
    """Options for ``stringify_cookie`` and ``stringify_set_cookie``.

    Attributes:
        encode: Turns a value into a cookie-value. Defaults to
            ``percent_encode``; should mirror the decoder used when parsing.
            Its output is still validated against the cookie-value grammar.
    """

    encode: Encoder = percent_encode

    def __post_init__(self) -> None:
        if not callable(self.encode):
            raise InvalidArgument("option", "encode", self.encode)


DEFAULT_PARSE_OPTIONS = ParseOptions()
DEFAULT_STRINGIFY_OPTIONS = StringifyOptions()
