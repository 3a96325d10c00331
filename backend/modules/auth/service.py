"""
Credential verifier implementation.

Validates HMAC-signed JWT bearer tokens against the shared secret from
settings.
"""

import logging
from typing import Optional

from jose import jwt, JWTError
from pydantic import ValidationError

from shared.config import Settings
from shared.exceptions import (
    InvalidTokenError,
    ServerMisconfiguredError,
    UnauthenticatedError,
)

from .interfaces import ICredentialVerifier
from .models import TokenClaims

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Return the token following the Bearer scheme marker, if any.

    The scheme is matched case-insensitively. Any other scheme, or a
    scheme with nothing after it, yields None.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        return None
    return token


class CredentialVerifier(ICredentialVerifier):
    """
    Verifies bearer tokens with a single shared secret.

    No refresh, revocation or key rotation: one secret, checked per request.
    """

    def __init__(self, settings: Settings):
        self._secret = settings.jwt_secret
        self._algorithms = settings.jwt_algorithms
        self._audience = settings.jwt_audience

    def verify(self, authorization: Optional[str]) -> TokenClaims:
        # Configuration is checked before the request is looked at at all.
        if not self._secret:
            logger.error("JWT_SECRET environment variable is not set")
            raise ServerMisconfiguredError()

        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError()

        return self.decode(token)

    def decode(self, token: str) -> TokenClaims:
        """
        Check signature and expiry, then return the claims.

        The audience claim is only enforced when an audience is configured.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=self._algorithms,
                audience=self._audience,
                options={
                    "verify_aud": self._audience is not None,
                    "require_aud": self._audience is not None,
                },
            )
            return TokenClaims.model_validate(payload)
        except (JWTError, ValidationError) as e:
            logger.debug("Token verification failed: %s", e)
            raise InvalidTokenError() from e
