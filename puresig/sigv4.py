"""
AWS Signature Version 4 request signing.

The signer computes every digest with the package's own SHA-256 and
HMAC-SHA256; see :mod:`puresig.sha256` and :mod:`puresig.hmac_sha256`.
"""

import logging
import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Union

from .canonical import build_canonical_request, normalize_headers, signed_headers
from .credentials import Credentials
from .encoding import format_timestamp, parse_url
from .exceptions import ClockError, MissingCredentialError
from .hmac_sha256 import SCOPE_TERMINATOR, derive_signing_key, hmac_sha256_hex
from .sha256 import sha256_hex

logger = logging.getLogger(__name__)

Headers = Dict[str, str]
Payload = Union[str, bytes, None]

ALGORITHM = 'AWS4-HMAC-SHA256'

HEADER_AUTHORIZATION = 'authorization'
HEADER_HOST = 'host'
HEADER_DATE = 'x-amz-date'
HEADER_SECURITY_TOKEN = 'x-amz-security-token'
HEADER_CONTENT_SHA256 = 'x-amz-content-sha256'


class Service(str, Enum):
    BEDROCK = 'bedrock'
    S3 = 's3'
    DYNAMODB = 'dynamodb'
    LAMBDA = 'lambda'
    IAM = 'iam'
    STS = 'sts'
    EC2 = 'ec2'
    EXECUTE_API = 'execute-api'


@dataclass(frozen=True)
class SigningContext:
    """Everything computed while signing one request.

    Holds a signing key and, through the canonical request and headers,
    possibly a session token, so only non-sensitive fields are shown by
    ``repr()``.
    """
    timestamp: str
    date: str
    credential_scope: str
    canonical_request: str = field(repr=False)
    signed_headers: str
    string_to_sign: str = field(repr=False)
    signing_key: bytes = field(repr=False)
    signature: str = field(repr=False)
    headers: Headers = field(repr=False)


def _system_clock() -> float:
    return time.time()


def _payload_bytes(payload: Payload) -> bytes:
    if payload is None:
        return b''
    if isinstance(payload, str):
        return payload.encode('utf-8')
    return bytes(payload)


class SigV4Signer:
    """Produces SigV4 authentication headers for a single AWS service.

    Instances hold only immutable state and may be shared between threads.
    """

    def __init__(
            self,
            credentials: Credentials,
            service: Union[str, Service] = Service.BEDROCK,
            clock: Optional[Callable[[], float]] = None
    ) -> None:
        if credentials is None:
            raise MissingCredentialError('credentials are required')
        self._credentials = credentials
        self._service = service.value if isinstance(service, Service) else service
        self._clock = clock or _system_clock

    @classmethod
    def from_env(
            cls,
            service: Union[str, Service] = Service.BEDROCK,
            environ: Optional[Mapping[str, str]] = None
    ) -> 'SigV4Signer':
        return cls(Credentials.from_env(environ), service)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def service(self) -> str:
        return self._service

    @property
    def region(self) -> str:
        return self._credentials.region

    def __repr__(self) -> str:
        return f'SigV4Signer(credentials={self._credentials!r}, service={self._service!r})'

    def _now(self) -> int:
        try:
            now = self._clock()
        except (OSError, OverflowError, ValueError) as exc:
            raise ClockError(f'Unable to read system clock: {exc}') from exc
        if now is None or not math.isfinite(now):
            raise ClockError(f'System clock returned an invalid time: {now}')
        if now < 0:
            raise ClockError(f'System clock is before the Unix epoch: {now}')
        return int(now)

    def _merge_headers(self, host: str, timestamp: str, extra_headers: Optional[Mapping[str, str]]) -> Headers:
        headers = normalize_headers(extra_headers or {})
        headers.pop(HEADER_AUTHORIZATION, None)
        headers[HEADER_HOST] = host
        headers[HEADER_DATE] = timestamp
        if self._credentials.session_token:
            headers[HEADER_SECURITY_TOKEN] = self._credentials.session_token
        return headers

    def build_context(
            self,
            method: str,
            url: str,
            extra_headers: Optional[Mapping[str, str]],
            payload: Payload,
            now: int
    ) -> SigningContext:
        """Run the full signing computation for a fixed epoch time ``now``."""
        timestamp = format_timestamp(now)
        date = timestamp[:8]
        parsed_url = parse_url(url)

        headers = self._merge_headers(parsed_url.host, timestamp, extra_headers)
        payload_hash = sha256_hex(_payload_bytes(payload))
        headers[HEADER_CONTENT_SHA256] = payload_hash

        canonical_request = build_canonical_request(method, parsed_url, headers, payload_hash)
        header_names = signed_headers(headers)

        region = self._credentials.region
        credential_scope = f'{date}/{region}/{self._service}/{SCOPE_TERMINATOR}'
        string_to_sign = '\n'.join([
            ALGORITHM,
            timestamp,
            credential_scope,
            sha256_hex(canonical_request.encode('utf-8')),
        ])

        signing_key = derive_signing_key(self._credentials.secret_access_key, date, region, self._service)
        signature = hmac_sha256_hex(signing_key, string_to_sign)

        headers[HEADER_AUTHORIZATION] = (
            f'{ALGORITHM} Credential={self._credentials.access_key_id}/{credential_scope}, '
            f'SignedHeaders={header_names}, Signature={signature}'
        )

        logger.debug(
            'Signed %s request to %s with scope %s (signed headers: %s)',
            method, parsed_url.host, credential_scope, header_names
        )

        return SigningContext(
            timestamp=timestamp,
            date=date,
            credential_scope=credential_scope,
            canonical_request=canonical_request,
            signed_headers=header_names,
            string_to_sign=string_to_sign,
            signing_key=signing_key,
            signature=signature,
            headers=headers,
        )

    def sign_request(
            self,
            method: str,
            url: str,
            extra_headers: Optional[Mapping[str, str]] = None,
            payload: Payload = b''
    ) -> Headers:
        """Sign a request against the current time.

        Args:
            method: HTTP method, used verbatim.
            url: Request URL; scheme, host, path and query are taken from it.
            extra_headers: Headers to sign and send along with the request.
            payload: Request body; text is encoded as UTF-8.

        Returns:
            Lowercase header map to attach to the request, including
            ``authorization``.

        Raises:
            ClockError: If the clock cannot be read or is before the epoch.
        """
        context = self.build_context(method, url, extra_headers, payload, self._now())
        return dict(context.headers)
