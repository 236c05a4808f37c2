"""``Set-Cookie`` response header: the SetCookie record, its parser and serializer.

parse_set_cookie is permissive (unknown or malformed attributes are
dropped), stringify_set_cookie is strict (every field is validated before
anything is emitted).
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from typing import Any

from crumb._internal.scan import find_end, find_eq, pair_value, trim_ows
from crumb.config import DEFAULT_PARSE_OPTIONS, DEFAULT_STRINGIFY_OPTIONS, ParseOptions, StringifyOptions
from crumb.dates import format_http_date, parse_http_date
from crumb.errors import InvalidArgument
from crumb.grammar import is_cookie_name, is_cookie_value, is_domain, is_max_age, is_path

logger = logging.getLogger("crumb.parse")


class Priority(StrEnum):
    """``Priority`` attribute values (draft-west-cookie-priority)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SameSite(StrEnum):
    """``SameSite`` attribute values (RFC 6265bis)."""

    STRICT = "strict"
    LAX = "lax"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class SetCookie:
    """A single ``Set-Cookie`` directive.

    ``None`` means the attribute was not given, which is distinct from
    ``False``. When serializing, ``same_site`` also accepts ``True``
    (meaning ``Strict``) and ``priority``/``same_site`` accept any
    capitalization of their string values.
    """

    name: str
    value: str | None = ""
    max_age: int | None = None
    expires: datetime | None = None
    domain: str | None = None
    path: str | None = None
    http_only: bool | None = None
    secure: bool | None = None
    partitioned: bool | None = None
    priority: Priority | str | None = None
    same_site: SameSite | str | bool | None = None

    def to_header_value(self, options: StringifyOptions | None = None) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        return stringify_set_cookie(self, options=options)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _parse_attribute(attrs: dict[str, Any], name: str, value: str | None) -> None:
    """Record one attribute into *attrs*, ignoring anything invalid."""
    match name.lower():
        case "httponly":
            attrs["http_only"] = True
        case "secure":
            attrs["secure"] = True
        case "partitioned":
            attrs["partitioned"] = True
        case "domain":
            attrs["domain"] = value
        case "path":
            attrs["path"] = value
        case "max-age":
            if value and is_max_age(value):
                attrs["max_age"] = int(value)
            else:
                logger.debug("Ignoring invalid Max-Age %r", value)
        case "expires":
            expires = parse_http_date(value) if value else None
            if expires is not None:
                attrs["expires"] = expires
            else:
                logger.debug("Ignoring invalid Expires %r", value)
        case "priority":
            if value and value.lower() in Priority:
                attrs["priority"] = Priority(value.lower())
            else:
                logger.debug("Ignoring invalid Priority %r", value)
        case "samesite":
            if value and value.lower() in SameSite:
                attrs["same_site"] = SameSite(value.lower())
            else:
                logger.debug("Ignoring invalid SameSite %r", value)
        case "":
            pass
        case _:
            logger.debug("Ignoring unknown attribute %r", name)


def parse_set_cookie(header: str, options: ParseOptions | None = None) -> SetCookie:
    """Parse one ``Set-Cookie`` header value into a ``SetCookie``.

    The leading segment is the name=value pair; without an ``=`` the whole
    segment is the value and the name is empty. Attributes are matched
    case-insensitively and later occurrences override earlier ones::

        parse_set_cookie("id=a3f; Max-Age=60; HttpOnly")
        # SetCookie(name="id", value="a3f", max_age=60, http_only=True)
    """
    if not isinstance(header, str):
        raise InvalidArgument("argument", "header", header, detail="argument header must be a string")

    decode = (options or DEFAULT_PARSE_OPTIONS).decode
    length = len(header)
    end = find_end(header, 0, length)
    eq = find_eq(header, 0, end)
    if eq == -1:
        name = ""
        value = pair_value(decode, header, 0, end)
    else:
        name = trim_ows(header, 0, eq)
        value = pair_value(decode, header, eq + 1, end)

    attrs: dict[str, Any] = {}
    index = end + 1
    while index < length:
        end = find_end(header, index, length)
        eq = find_eq(header, index, end)
        if eq == -1:
            _parse_attribute(attrs, trim_ows(header, index, end), None)
        else:
            _parse_attribute(attrs, trim_ows(header, index, eq), trim_ows(header, eq + 1, end))
        index = end + 1

    return SetCookie(name=name, value=value, **attrs)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

_PRIORITY_TOKENS = {Priority.LOW: "Low", Priority.MEDIUM: "Medium", Priority.HIGH: "High"}
_SAME_SITE_TOKENS = {SameSite.STRICT: "Strict", SameSite.LAX: "Lax", SameSite.NONE: "None"}


def _priority_token(priority: Any) -> str:
    key = priority.lower() if isinstance(priority, str) else None
    if key not in _PRIORITY_TOKENS:
        raise InvalidArgument("option", "priority", priority)
    return _PRIORITY_TOKENS[key]


def _same_site_token(same_site: Any) -> str:
    if same_site is True:
        return _SAME_SITE_TOKENS[SameSite.STRICT]
    key = same_site.lower() if isinstance(same_site, str) else None
    if key not in _SAME_SITE_TOKENS:
        raise InvalidArgument("option", "same_site", same_site)
    return _SAME_SITE_TOKENS[key]


def stringify_set_cookie(
    cookie: SetCookie | str,
    value: str | None = None,
    options: StringifyOptions | None = None,
    **attributes: Any,
) -> str:
    """Serialize a cookie and its attributes into a ``Set-Cookie`` header value.

    Call with a record (optionally followed by ``StringifyOptions``), or
    with a name, a value and attribute keywords::

        stringify_set_cookie(SetCookie("id", "a3f", http_only=True))
        stringify_set_cookie(SetCookie("id", "a3f"), StringifyOptions(encode=str))
        stringify_set_cookie("id", "a3f", http_only=True, same_site="lax")

    Attributes are emitted in a fixed order: Max-Age, Domain, Path,
    Expires, HttpOnly, Secure, Partitioned, Priority, SameSite. Raises
    ``InvalidArgument`` for the first invalid field.
    """
    if isinstance(cookie, SetCookie):
        if isinstance(value, StringifyOptions):
            options = value
        elif value is not None:
            raise InvalidArgument("argument", "val", value)
        if attributes:
            cookie = replace(cookie, **attributes)
    else:
        cookie = SetCookie(name=cookie, value=value, **attributes)

    encode = (options or DEFAULT_STRINGIFY_OPTIONS).encode

    if not isinstance(cookie.name, str) or not is_cookie_name(cookie.name):
        raise InvalidArgument("argument", "name", cookie.name)

    try:
        encoded = encode(cookie.value) if cookie.value else ""
    except UnicodeEncodeError:
        raise InvalidArgument("argument", "val", cookie.value) from None
    if not isinstance(encoded, str) or not is_cookie_value(encoded):
        raise InvalidArgument("argument", "val", cookie.value)

    parts = [f"{cookie.name}={encoded}"]

    if cookie.max_age is not None:
        max_age = cookie.max_age
        if isinstance(max_age, float) and max_age.is_integer():
            max_age = int(max_age)
        if not isinstance(max_age, int) or isinstance(max_age, bool):
            raise InvalidArgument("option", "max_age", cookie.max_age)
        parts.append(f"Max-Age={max_age}")

    if cookie.domain:
        if not isinstance(cookie.domain, str) or not is_domain(cookie.domain):
            raise InvalidArgument("option", "domain", cookie.domain)
        parts.append(f"Domain={cookie.domain}")

    if cookie.path:
        if not isinstance(cookie.path, str) or not is_path(cookie.path):
            raise InvalidArgument("option", "path", cookie.path)
        parts.append(f"Path={cookie.path}")

    if cookie.expires:
        if not isinstance(cookie.expires, datetime):
            raise InvalidArgument("option", "expires", cookie.expires)
        try:
            parts.append(f"Expires={format_http_date(cookie.expires)}")
        except (OverflowError, ValueError):
            raise InvalidArgument("option", "expires", cookie.expires) from None

    if cookie.http_only:
        parts.append("HttpOnly")

    if cookie.secure:
        parts.append("Secure")

    if cookie.partitioned:
        parts.append("Partitioned")

    if cookie.priority:
        parts.append(f"Priority={_priority_token(cookie.priority)}")

    if cookie.same_site:
        parts.append(f"SameSite={_same_site_token(cookie.same_site)}")

    return "; ".join(parts)


def stringify_set_cookies(
    cookies: Mapping[str, str | None],
    options: StringifyOptions | None = None,
    **attributes: Any,
) -> list[str]:
    """Serialize each entry of *cookies* as its own ``Set-Cookie`` value.

    Every header shares *attributes*. Entries whose value is ``None`` are
    skipped. All entries are validated before any header is returned.
    """
    if not isinstance(cookies, Mapping):
        raise InvalidArgument("argument", "cookies", cookies, detail="argument cookies must be a mapping")
    return [
        stringify_set_cookie(name, value, options, **attributes)
        for name, value in cookies.items()
        if value is not None
    ]
