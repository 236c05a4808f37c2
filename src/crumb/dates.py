"""HTTP-date handling for the ``Expires`` attribute.

Parsing is lenient (anything a browser would accept should come back as
a datetime); formatting always produces the RFC 7231 IMF-fixdate form::

    Wed, 21 Oct 2015 07:28:00 GMT
"""

from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_http_date(text: str) -> datetime | None:
    """Parse an ``Expires`` value into an aware UTC datetime.

    Accepts the RFC 1123, RFC 850 and asctime forms, then falls back to
    ISO 8601. Returns ``None`` for anything unparseable, never raises.
    Dates without a zone are taken to be UTC.
    """
    text = text.strip()
    if not text:
        return None
    try:
        return _as_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError, OverflowError):
        pass
    try:
        return _as_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        return None


def format_http_date(value: datetime) -> str:
    """Format *value* as an IMF-fixdate. Naive datetimes are taken as UTC."""
    return format_datetime(_as_utc(value), usegmt=True)
