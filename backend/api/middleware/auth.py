"""
Bearer token authentication dependency.

Gates protected routes: the raw Authorization header is handed to the
credential verifier and the resulting claims are attached to the request.
"""

from typing import Optional
from fastapi import Depends, Header, Request

from modules.auth.interfaces import ICredentialVerifier
from modules.auth.models import TokenClaims

from ..dependencies import get_credential_verifier


async def require_auth(
    request: Request,
    authorization: Optional[str] = Header(None),
    verifier: ICredentialVerifier = Depends(get_credential_verifier),
) -> TokenClaims:
    """
    Dependency that requires a valid bearer token.

    Failures propagate as UsersApiError subclasses and are rendered by the
    handlers in api/errors.py.

    Usage:
        @router.get("/protected")
        async def protected_route(claims: TokenClaims = Depends(require_auth)):
            return {"sub": claims.sub}
    """
    claims = verifier.verify(authorization)
    request.state.claims = claims
    return claims

