"""
HMAC-SHA256 (RFC 2104) on top of the pure-Python SHA-256, and the SigV4
signing-key derivation chain built from it.
"""

from typing import Union

from .sha256 import BLOCK_SIZE, sha256

_IPAD = bytes([0x36] * BLOCK_SIZE)
_OPAD = bytes([0x5c] * BLOCK_SIZE)

SCOPE_TERMINATOR = 'aws4_request'


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


def hmac_sha256(key: Union[str, bytes], data: Union[str, bytes]) -> bytes:
    """Return the 32-byte HMAC-SHA256 of ``data`` under ``key``.

    Keys longer than the 64-byte block are hashed first; shorter keys are
    zero-padded to the block size.
    """
    key = _to_bytes(key)
    if len(key) > BLOCK_SIZE:
        key = sha256(key)
    key = key.ljust(BLOCK_SIZE, b'\x00')

    inner = sha256(bytes(k ^ p for k, p in zip(key, _IPAD)) + _to_bytes(data))
    return sha256(bytes(k ^ p for k, p in zip(key, _OPAD)) + inner)


def hmac_sha256_hex(key: Union[str, bytes], data: Union[str, bytes]) -> str:
    return hmac_sha256(key, data).hex()


def derive_signing_key(secret_access_key: str, date: str, region: str, service: str) -> bytes:
    """Derive the per-request SigV4 signing key.

    ``date`` is the ``YYYYMMDD`` prefix of the request timestamp. The key is
    only valid for that date, region and service.
    """
    k_date = hmac_sha256('AWS4' + secret_access_key, date)
    k_region = hmac_sha256(k_date, region)
    k_service = hmac_sha256(k_region, service)
    return hmac_sha256(k_service, SCOPE_TERMINATOR)
