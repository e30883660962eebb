"""
Canonical request construction for SigV4.

Every ordering here is an explicit sort; nothing depends on dict
iteration order.
"""

from typing import Dict, List, Mapping, Optional, Tuple

from .encoding import ParsedUrl, uri_encode


def normalize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Lowercase header names, coalescing names that differ only by case.

    When the same logical header appears more than once, the last value in
    iteration order wins.
    """
    return {name.lower(): value for name, value in headers.items()}


def canonical_uri(path: str) -> str:
    if not path:
        return '/'
    return uri_encode(path, encode_slash=False)


def canonical_query_string(query: Optional[str]) -> str:
    """Encode, sort and re-join a raw query string.

    Pairs are ordered by encoded key, then encoded value. A bare ``?`` with
    nothing after it yields the empty string, not a single ``=`` pair.
    """
    if not query:
        return ''

    pairs: List[Tuple[str, str]] = []
    for pair in query.split('&'):
        key, _, value = pair.partition('=')
        pairs.append((uri_encode(key), uri_encode(value)))
    pairs.sort()
    return '&'.join(f'{key}={value}' for key, value in pairs)


def _sorted_items(headers: Mapping[str, str]) -> List[Tuple[str, str]]:
    return sorted(normalize_headers(headers).items())


def canonical_headers(headers: Mapping[str, str]) -> str:
    """One ``name:value`` line per header, each terminated by a newline."""
    return ''.join(f'{name}:{str(value).strip()}\n' for name, value in _sorted_items(headers))


def signed_headers(headers: Mapping[str, str]) -> str:
    return ';'.join(name for name, _ in _sorted_items(headers))


def build_canonical_request(
        method: str,
        parsed_url: ParsedUrl,
        headers: Mapping[str, str],
        payload_hash: str
) -> str:
    # canonical_headers() already ends in a newline, which yields the blank
    # separator line before the signed header list.
    return '\n'.join([
        method,
        canonical_uri(parsed_url.path),
        canonical_query_string(parsed_url.query),
        canonical_headers(headers),
        signed_headers(headers),
        payload_hash,
    ])
