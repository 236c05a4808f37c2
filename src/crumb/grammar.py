"""RFC 6265 grammar checks used before anything is serialized.

Each check is a predicate ``(str) -> bool`` over a compiled pattern.
The patterns are deliberately a little wider than the RFC where real
browsers are (see the notes on each one).
"""

import re

# cookie-name = token (RFC 7230 tchar), widened to every printable ASCII
# character except "=" and ";", the two that delimit a pair.
_COOKIE_NAME_RE = re.compile(r"[\x21-\x3A\x3C\x3E-\x7E]+")

# cookie-octet = %x21 / %x23-2B / %x2D-3A / %x3C-5B / %x5D-7E, widened to
# allow DQUOTE, comma and backslash, which the parsing algorithm ignores.
_COOKIE_VALUE_RE = re.compile(r"[\x21-\x3A\x3C-\x7E]*")

# RFC 1034 subdomain as enhanced by RFC 1123: letter-or-digit labels of at
# most 63 characters. A leading "." is tolerated; browsers ignore it.
_DOMAIN_RE = re.compile(
    r"([.]?[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?)([.][a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?)*",
    re.IGNORECASE | re.ASCII,
)

# path-value = <any CHAR except CTLs or ";">
_PATH_RE = re.compile(r"[\x20-\x3A\x3D-\x7E]*")

# max-age-av = "Max-Age=" ["-"] 1*DIGIT (RFC 6265 sec 5.2.2)
_MAX_AGE_RE = re.compile(r"-?[0-9]+")


def is_cookie_name(name: str) -> bool:
    """Name is a non-empty token without ``=``, ``;``, whitespace or CTLs."""
    return _COOKIE_NAME_RE.fullmatch(name) is not None


def is_cookie_value(value: str) -> bool:
    """Encoded value contains only printable ASCII other than ``;``."""
    return _COOKIE_VALUE_RE.fullmatch(value) is not None


def is_domain(domain: str) -> bool:
    return _DOMAIN_RE.fullmatch(domain) is not None


def is_path(path: str) -> bool:
    return _PATH_RE.fullmatch(path) is not None


def is_max_age(value: str) -> bool:
    """Optional minus sign followed by ASCII digits only."""
    return _MAX_AGE_RE.fullmatch(value) is not None
