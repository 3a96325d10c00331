"""
Authentication module.

Verifies bearer tokens and exposes their claims to route handlers.

Public API:
- ICredentialVerifier: Interface for token verification
- CredentialVerifier: Shared-secret JWT implementation
- TokenClaims: Decoded token payload
"""

from .interfaces import ICredentialVerifier
from .models import TokenClaims
from .service import CredentialVerifier, extract_bearer_token

__all__ = [
    # Interface
    "ICredentialVerifier",
    # Implementation
    "CredentialVerifier",
    "extract_bearer_token",
    # Models
    "TokenClaims",
]
