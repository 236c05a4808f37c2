"""``Cookie`` request header: parse_cookie and stringify_cookie.

The read side returns an immutable ``Cookies`` mapping; the write side
validates every name and encoded value before joining them.
"""

from collections.abc import Iterator, Mapping

from crumb._internal.multimap import MultiValueMapping
from crumb._internal.scan import find_end, find_eq, pair_value, trim_ows
from crumb.config import DEFAULT_PARSE_OPTIONS, DEFAULT_STRINGIFY_OPTIONS, ParseOptions, StringifyOptions
from crumb.errors import InvalidArgument
from crumb.grammar import is_cookie_name, is_cookie_value

# Shortest header that can hold a pair: one-char name plus "="
_MIN_PAIR_LENGTH = 2


def _first(values: list[str | None]) -> str | None:
    return next((value for value in values if value is not None), None)


class Cookies(Mapping[str, str | None]):
    """Immutable cookies from a ``Cookie`` header.

    Attributes:
        _data: Cookie name -> every decoded value, in header order.

    Implements ``MultiValueMapping``. ``__getitem__`` returns the first
    value sent for a name, skipping values a custom decoder turned into
    ``None``. ``get_list`` returns all of them (browsers send duplicates
    when cookies with the same name are scoped to different paths).
    """

    _data: dict[str, list[str | None]]

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, list[str | None]] | None = None) -> None:
        object.__setattr__(self, "_data", data if data is not None else {})

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, key: str) -> str | None:
        return _first(self._data[key])

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Cookies({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return _first(values)
        return default

    def get_list(self, key: str) -> list[str | None]:
        """Return every value sent for *key*, first one first."""
        return list(self._data.get(key, []))


def parse_cookie(header: str, options: ParseOptions | None = None) -> Cookies:
    """Parse a ``Cookie`` header value into a ``Cookies`` mapping.

    Names and values are trimmed of spaces and tabs, one layer of double
    quotes is removed from values, and values are decoded with
    ``options.decode``. Segments without ``=`` are skipped. The first
    occurrence of a name wins for ``cookies[name]``::

        >>> parse_cookie("a=1; b=%20; a=2")
        Cookies({'a': '1', 'b': ' '})
    """
    if not isinstance(header, str):
        raise InvalidArgument("argument", "header", header, detail="argument header must be a string")

    data: dict[str, list[str | None]] = {}
    length = len(header)
    if length < _MIN_PAIR_LENGTH:
        return Cookies(data)

    decode = (options or DEFAULT_PARSE_OPTIONS).decode
    index = 0
    while index < length:
        eq = find_eq(header, index, length)
        if eq == -1:
            break

        end = find_end(header, index, length)
        if eq > end:
            # The "=" belongs to a later pair; resume after the last ";" before it
            index = header.rfind(";", index, eq) + 1
            continue

        key = trim_ows(header, index, eq)
        data.setdefault(key, []).append(pair_value(decode, header, eq + 1, end))
        index = end + 1

    return Cookies(data)


def stringify_cookie(cookies: Mapping[str, str | None], options: StringifyOptions | None = None) -> str:
    """Serialize a name -> value mapping into a ``Cookie`` header value.

    Entries whose value is ``None`` are skipped. A ``MultiValueMapping``
    (such as ``Cookies``) contributes every value of a name, in order.
    Raises ``InvalidArgument`` for a name outside the cookie-name grammar
    or an encoded value outside the cookie-value grammar; nothing is
    returned in that case.
    """
    if not isinstance(cookies, Mapping):
        raise InvalidArgument("argument", "cookies", cookies, detail="argument cookies must be a mapping")

    encode = (options or DEFAULT_STRINGIFY_OPTIONS).encode
    pairs: list[str] = []
    if isinstance(cookies, MultiValueMapping):
        entries = [(name, value) for name in cookies for value in cookies.get_list(name)]
    else:
        entries = list(cookies.items())

    for name, value in entries:
        if value is None:
            continue
        if not isinstance(name, str) or not is_cookie_name(name):
            raise InvalidArgument("cookie", "name", name)
        try:
            encoded = encode(value)
        except UnicodeEncodeError:
            raise InvalidArgument("cookie", "val", value) from None
        if not isinstance(encoded, str) or not is_cookie_value(encoded):
            raise InvalidArgument("cookie", "val", value)
        pairs.append(f"{name}={encoded}")
    return "; ".join(pairs)
