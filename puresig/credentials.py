"""
AWS credentials for the signer.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import MissingCredentialError

logger = logging.getLogger(__name__)

ENV_ACCESS_KEY_ID = 'AWS_ACCESS_KEY_ID'
ENV_SECRET_ACCESS_KEY = 'AWS_SECRET_ACCESS_KEY'
ENV_SESSION_TOKEN = 'AWS_SESSION_TOKEN'
ENV_REGION = 'AWS_REGION'
ENV_DEFAULT_REGION = 'AWS_DEFAULT_REGION'

DEFAULT_REGION = 'us-east-1'

REDACTED = 'REDACTED'


def mask(value: Optional[str], visible: int = 4) -> str:
    """Hide all but the last ``visible`` characters of ``value``."""
    if not value:
        return repr(value)
    if len(value) <= visible * 2:
        return REDACTED
    return f"'****{value[-visible:]}'"


@dataclass(frozen=True, repr=False)
class Credentials:
    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None
    region: str = DEFAULT_REGION

    def __post_init__(self) -> None:
        for field_name in ('access_key_id', 'secret_access_key', 'region'):
            if not getattr(self, field_name):
                raise MissingCredentialError(f'{field_name} must not be empty')

    def __repr__(self) -> str:
        token = REDACTED if self.session_token else None
        return (
            f'Credentials(access_key_id={mask(self.access_key_id)}, '
            f'secret_access_key={REDACTED}, session_token={token}, '
            f'region={self.region!r})'
        )

    __str__ = __repr__

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Credentials':
        """Load credentials from the standard AWS environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            MissingCredentialError: If the key id or secret is not set.
        """
        if environ is None:
            environ = os.environ

        missing = [name for name in (ENV_ACCESS_KEY_ID, ENV_SECRET_ACCESS_KEY) if not environ.get(name)]
        if missing:
            raise MissingCredentialError(
                f"{', '.join(missing)} environment variable{'s' if len(missing) > 1 else ''} not set"
            )

        region = environ.get(ENV_REGION) or environ.get(ENV_DEFAULT_REGION) or DEFAULT_REGION
        session_token = environ.get(ENV_SESSION_TOKEN) or None
        logger.debug(
            'Loaded AWS credentials from environment: region=%s, session_token=%s',
            region, 'present' if session_token else 'absent'
        )
        return cls(
            access_key_id=environ[ENV_ACCESS_KEY_ID],
            secret_access_key=environ[ENV_SECRET_ACCESS_KEY],
            region=region,
            session_token=session_token,
        )
