"""Crumb — RFC 6265 cookie header parsing and serialization.

Converts ``Cookie`` and ``Set-Cookie`` header values to and from plain
Python structures. Parsing is forgiving, serialization is strict.

Basic usage::

    from crumb import parse_cookie, stringify_set_cookie

    cookies = parse_cookie("session=abc123; theme=dark")
    cookies["theme"]  # "dark"

    stringify_set_cookie("session", "abc123", http_only=True, same_site="lax")
    # "session=abc123; HttpOnly; SameSite=Lax"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "Cookies",
    "CrumbError",
    "InvalidArgument",
    "ParseOptions",
    "Priority",
    "SameSite",
    "SetCookie",
    "StringifyOptions",
    "parse",
    "parse_cookie",
    "parse_set_cookie",
    "serialize",
    "stringify_cookie",
    "stringify_set_cookie",
    "stringify_set_cookies",
]

# Public name -> (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Cookies": ("crumb.http.cookies", "Cookies"),
    "CrumbError": ("crumb.errors", "CrumbError"),
    "InvalidArgument": ("crumb.errors", "InvalidArgument"),
    "ParseOptions": ("crumb.config", "ParseOptions"),
    "Priority": ("crumb.http.set_cookie", "Priority"),
    "SameSite": ("crumb.http.set_cookie", "SameSite"),
    "SetCookie": ("crumb.http.set_cookie", "SetCookie"),
    "StringifyOptions": ("crumb.config", "StringifyOptions"),
    # Backward-compatible names for the two most common calls
    "parse": ("crumb.http.cookies", "parse_cookie"),
    "parse_cookie": ("crumb.http.cookies", "parse_cookie"),
    "parse_set_cookie": ("crumb.http.set_cookie", "parse_set_cookie"),
    "serialize": ("crumb.http.set_cookie", "stringify_set_cookie"),
    "stringify_cookie": ("crumb.http.cookies", "stringify_cookie"),
    "stringify_set_cookie": ("crumb.http.set_cookie", "stringify_set_cookie"),
    "stringify_set_cookies": ("crumb.http.set_cookie", "stringify_set_cookies"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    target = _LAZY_IMPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    module_name, attr = target
    return getattr(import_module(module_name), attr)
