"""
AWS Signature Version 4 - Pure Python Implementation

This package signs AWS requests with SigV4 using its own SHA-256 and
HMAC-SHA256, without hashlib, hmac or botocore on the signing path.
"""

from .credentials import Credentials
from .exceptions import ClockError, MissingCredentialError, SigningError
from .sigv4 import SigV4Signer, SigningContext, Service, Headers

__version__ = "0.1.0"
__all__ = [
    "SigV4Signer",
    "SigningContext",
    "Service",
    "Headers",
    "Credentials",
    "SigningError",
    "ClockError",
    "MissingCredentialError",
]
