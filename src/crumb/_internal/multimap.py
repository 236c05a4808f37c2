"""MultiValueMapping protocol — the read interface of ``Cookies``.

A structural protocol so callers can accept any multi-valued cookie
mapping (including one from another framework) without coupling to
the concrete type.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where a name can carry several values.

    ``__getitem__`` returns the first value sent for a name.
    ``get_list`` returns every value, in header order.

    Spelled out with dunder methods because Protocols cannot inherit
    from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> str | None: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str | None]: ...
