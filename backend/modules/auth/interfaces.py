"""
Authentication module interface.

Route dependencies depend on ICredentialVerifier, not the concrete
implementation, so tests can substitute their own verifier.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class ICredentialVerifier(Protocol):
    """Contract for turning an Authorization header into token claims."""

    def verify(self, authorization: Optional[str]) -> TokenClaims:
        """
        Verify the bearer token carried by a raw Authorization header.

        Args:
            authorization: Header value as received, or None if absent

        Returns:
            TokenClaims decoded from the verified token

        Raises:
            ServerMisconfiguredError: If no signing secret is configured
            UnauthenticatedError: If no bearer token is present
            InvalidTokenError: If the token fails verification
        """
        ...
