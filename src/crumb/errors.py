"""Crumb exception hierarchy.

Parsing never raises past the top-level type check. Serialization raises
``InvalidArgument`` for the first field that fails its grammar.
"""

from typing import Any


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class InvalidArgument(CrumbError, TypeError):  # noqa: N818
    """An argument or option that cannot be encoded into a header.

    ``kind`` is ``"argument"``, ``"option"`` or ``"cookie"`` and, together
    with ``field``, names what was rejected::

        >>> str(InvalidArgument("option", "max_age", 3.14))
        'option max_age is invalid: 3.14'
    """

    def __init__(self, kind: str, field: str, value: Any = None, detail: str = "") -> None:
        self.kind = kind
        self.field = field
        self.value = value
        super().__init__(detail or f"{kind} {field} is invalid: {value}")
