"""
Text helpers for SigV4: URI encoding, ISO-8601 basic timestamps and a
minimal URL splitter.
"""

from typing import NamedTuple, Optional, Tuple, Union

_UNRESERVED = frozenset(
    b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~'
)
_SLASH = ord('/')

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_MONTH_LEAP = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ---------------------------------------------------------------------------
# URI encoding
# ---------------------------------------------------------------------------


def uri_encode(value: Union[str, bytes], encode_slash: bool = True) -> str:
    """Percent-encode ``value`` using the SigV4 rules.

    Unreserved bytes (``A-Z a-z 0-9 - _ . ~``) pass through, ``/`` passes
    through when ``encode_slash`` is false, every other byte becomes
    ``%XX`` with uppercase hex. Text is encoded as UTF-8 first.
    """
    if isinstance(value, str):
        value = value.encode('utf-8')

    result = []
    for byte in value:
        if byte in _UNRESERVED or (byte == _SLASH and not encode_slash):
            result.append(chr(byte))
        else:
            result.append(f'%{byte:02X}')
    return ''.join(result)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_to_ymd(days: int) -> Tuple[int, int, int]:
    """Convert a day count since 1970-01-01 to a proleptic Gregorian date."""
    year = 1970
    while True:
        days_in_year = 366 if is_leap_year(year) else 365
        if days < days_in_year:
            break
        days -= days_in_year
        year += 1

    month = 1
    for days_in_month in (_DAYS_IN_MONTH_LEAP if is_leap_year(year) else _DAYS_IN_MONTH):
        if days < days_in_month:
            break
        days -= days_in_month
        month += 1

    return year, month, days + 1


def format_timestamp(unix_seconds: int) -> str:
    """Format epoch seconds as ``YYYYMMDDTHHMMSSZ`` (UTC).

    Raises:
        ValueError: If ``unix_seconds`` is before the epoch.
    """
    if unix_seconds < 0:
        raise ValueError(f'Timestamp before the Unix epoch: {unix_seconds}')

    days, remaining = divmod(int(unix_seconds), SECONDS_PER_DAY)
    year, month, day = days_to_ymd(days)
    hours, remaining = divmod(remaining, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remaining, SECONDS_PER_MINUTE)
    return f'{year:04d}{month:02d}{day:02d}T{hours:02d}{minutes:02d}{seconds:02d}Z'


# ---------------------------------------------------------------------------
# URL splitting
# ---------------------------------------------------------------------------


class ParsedUrl(NamedTuple):
    host: str
    path: str
    query: Optional[str]


def parse_url(url: str) -> ParsedUrl:
    """Split ``url`` into host, path and raw query.

    This is deliberately permissive: nothing is validated, malformed input
    just produces whatever split falls out. The port, if any, stays part of
    the host.
    """
    for scheme in ('https://', 'http://'):
        if url.startswith(scheme):
            url = url[len(scheme):]
            break

    host_and_path, sep, query = url.partition('?')
    host, slash, rest = host_and_path.partition('/')
    path = slash + rest if slash else '/'
    return ParsedUrl(host, path, query if sep else None)
